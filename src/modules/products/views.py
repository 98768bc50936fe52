"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
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

from modules.products.dtos import ProductDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    LowStockQuerySerializer,
    ProductSearchQuerySerializer,
    ProductSerializer,
)
from modules.products.services import ProductService


@extend_schema_view(
    list=extend_schema(summary="Get all products"),
    retrieve=extend_schema(summary="Get product by ID"),
    create=extend_schema(summary="Create product"),
    update=extend_schema(summary="Update product"),
    destroy=extend_schema(summary="Delete product"),
)
class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD and catalog look-ups.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    ``queryset`` is declared for schema generation only; all ORM access
    goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products(request.query_params)
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        product = self._service.get_product(pk)
        return Response(ProductSerializer(product).data)

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        dto = self._read_dto(request)
        product = self._service.create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        dto = self._read_dto(request)
        product = self._service.update_product(pk, dto)
        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        self._service.delete_product(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Look-ups
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Search products by name",
        parameters=[ProductSearchQuerySerializer],
        responses=ProductSerializer(many=True),
    )
    @action(detail=False, methods=["get"], url_path="search")
    def search(self, request: Request) -> Response:
        """GET /api/products/search?name="""
        query = ProductSearchQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        products = self._service.search_by_name(query.validated_data["name"])
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(
        summary="Find products by category",
        parameters=[OpenApiParameter("category", str, OpenApiParameter.PATH)],
        responses=ProductSerializer(many=True),
    )
    @action(detail=False, methods=["get"], url_path=r"category/(?P<category>[^/]+)")
    def by_category(self, request: Request, category: str) -> Response:
        """GET /api/products/category/{category}"""
        products = self._service.find_by_category(category)
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(
        summary="Find low stock products",
        description="Products whose quantity is strictly below the threshold.",
        parameters=[LowStockQuerySerializer],
        responses=ProductSerializer(many=True),
    )
    @action(detail=False, methods=["get"], url_path="low-stock")
    def low_stock(self, request: Request) -> Response:
        """GET /api/products/low-stock?threshold=5"""
        query = LowStockQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        products = self._service.find_low_stock(query.validated_data["threshold"])
        return Response(ProductSerializer(products, many=True).data)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _read_dto(request: Request) -> ProductDTO:
        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return ProductDTO(**serializer.validated_data)
