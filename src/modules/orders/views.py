"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.
Domain exceptions propagate to ``api_exception_handler``, which maps
them to status codes; the views never catch them.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import (
    CreateOrderSerializer,
    DateRangeQuerySerializer,
    OrderSerializer,
    StatusQuerySerializer,
)
from modules.orders.services import OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository


@extend_schema_view(
    list=extend_schema(summary="Get all orders"),
    retrieve=extend_schema(summary="Get order by ID"),
    destroy=extend_schema(
        summary="Delete order",
        description="Deletes the order and its lines. Stock is not restored.",
    ),
)
class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with injected repositories (DIP).
    ``queryset`` is declared for schema generation only.
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Create order",
        description=(
            "Reserves stock for every line and records the order in one "
            "transaction. Fails without side effects if a product is missing "
            "or short."
        ),
        request=CreateOrderSerializer,
        responses={201: OrderSerializer},
    )
    def create(self, request: Request) -> Response:
        """POST /api/orders"""
        create_serializer = CreateOrderSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)

        data = create_serializer.validated_data
        dto = CreateOrderDTO(
            customer_name=data["customer_name"],
            customer_email=data["customer_email"],
            status=data.get("status"),
            order_date=data.get("order_date"),
            items=[
                CreateOrderItemDTO(
                    product_id=item["product_id"],
                    quantity=item["quantity"],
                )
                for item in data["items"]
            ],
        )

        order = self._service.create_order(dto)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # List / Retrieve / Destroy
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/orders"""
        orders = self._service.list_orders(request.query_params)
        return Response(OrderSerializer(orders, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/orders/{pk}"""
        order = self._service.get_order(pk)
        return Response(OrderSerializer(order).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/orders/{pk}"""
        self._service.delete_order(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Status update
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Update order status",
        description="Any status value is accepted; there is no transition guard.",
        parameters=[StatusQuerySerializer],
        request=None,
        responses=OrderSerializer,
    )
    @action(detail=True, methods=["put"], url_path="status")
    def update_status(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/orders/{pk}/status?status="""
        query = StatusQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        order = self._service.update_status(pk, query.validated_data["status"])
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Look-ups
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Find orders by status",
        parameters=[OpenApiParameter("order_status", str, OpenApiParameter.PATH)],
        responses=OrderSerializer(many=True),
    )
    @action(detail=False, methods=["get"], url_path=r"status/(?P<order_status>[^/]+)")
    def by_status(self, request: Request, order_status: str) -> Response:
        """GET /api/orders/status/{status}"""
        orders = self._service.find_by_status(order_status)
        return Response(OrderSerializer(orders, many=True).data)

    @extend_schema(
        summary="Find orders by customer email",
        parameters=[OpenApiParameter("email", str, OpenApiParameter.PATH)],
        responses=OrderSerializer(many=True),
    )
    @action(detail=False, methods=["get"], url_path=r"customer/(?P<email>[^/]+)")
    def by_customer(self, request: Request, email: str) -> Response:
        """GET /api/orders/customer/{email}"""
        orders = self._service.find_by_customer_email(email)
        return Response(OrderSerializer(orders, many=True).data)

    @extend_schema(
        summary="Find orders by date range",
        description="Orders whose order date lies between startDate and endDate, inclusive.",
        parameters=[DateRangeQuerySerializer],
        responses=OrderSerializer(many=True),
    )
    @action(detail=False, methods=["get"], url_path="date-range")
    def date_range(self, request: Request) -> Response:
        """GET /api/orders/date-range?startDate=&endDate="""
        query = DateRangeQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        orders = self._service.find_by_date_range(
            query.validated_data["startDate"], query.validated_data["endDate"]
        )
        return Response(OrderSerializer(orders, many=True).data)
