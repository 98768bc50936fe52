import django_filters

from modules.orders.models import Order


class OrderFilter(django_filters.FilterSet):
    status = django_filters.CharFilter(field_name="status", lookup_expr="exact")
    customer_email = django_filters.CharFilter(
        field_name="customer_email", lookup_expr="exact"
    )
    start_date = django_filters.IsoDateTimeFilter(
        field_name="order_date", lookup_expr="gte"
    )
    end_date = django_filters.IsoDateTimeFilter(
        field_name="order_date", lookup_expr="lte"
    )
    min_total = django_filters.NumberFilter(
        field_name="total_amount", lookup_expr="gte"
    )
    max_total = django_filters.NumberFilter(
        field_name="total_amount", lookup_expr="lte"
    )

    class Meta:
        model = Order
        fields = [
            "status",
            "customer_email",
            "start_date",
            "end_date",
            "min_total",
            "max_total",
        ]
