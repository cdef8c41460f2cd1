"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Request data is parsed into Pydantic DTOs; every failure (DTO validation
or domain exception) propagates to the centralized
``modules.core.exception_handler``, so no view catches exceptions itself.
"""

from __future__ import annotations

from django.conf import settings
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import serializers, status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import (
    CreateProductDTO,
    ProductListQueryDTO,
    ProductScrollQueryDTO,
    UpdateProductDTO,
)
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ProductCursorPageSerializer,
    ProductInputSerializer,
    ProductPageSerializer,
    ProductSerializer,
)
from modules.products.services import ProductService

CATEGORY_PARAM = OpenApiParameter("category", str, required=True)
SIZE_PARAM = OpenApiParameter("size", int)


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD and category listings.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    queryset = Product.objects.none()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            repository=ProductDjangoRepository(),
            max_page_size=settings.MAX_PAGE_SIZE,
        )

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[
            CATEGORY_PARAM,
            OpenApiParameter("page", int),
            SIZE_PARAM,
            OpenApiParameter("sort", str, description="id, name; prefix '-' for DESC"),
        ],
        responses=ProductPageSerializer,
    )
    def list(self, request: Request) -> Response:
        """GET /api/v1/products/?category=...&page=0&size=20"""
        params = request.query_params
        query = ProductListQueryDTO(
            category=params.get("category", ""),
            page=params.get("page", 0),
            size=params.get("size", settings.DEFAULT_PAGE_SIZE),
            sort=params.get("sort") or None,
        )
        page = self._service.list_by_category(
            query.category, query.page, query.size, query.sort
        )
        return Response(ProductPageSerializer(page).data)

    @extend_schema(
        parameters=[CATEGORY_PARAM, OpenApiParameter("after", int), SIZE_PARAM],
        responses=ProductCursorPageSerializer,
    )
    @action(detail=False, methods=["get"], url_path="scroll")
    def scroll(self, request: Request) -> Response:
        """GET /api/v1/products/scroll/?category=...&after=0&size=20"""
        params = request.query_params
        query = ProductScrollQueryDTO(
            category=params.get("category", ""),
            after=params.get("after", 0),
            size=params.get("size", settings.DEFAULT_PAGE_SIZE),
        )
        page = self._service.list_by_category_after(
            query.category, query.after, query.size
        )
        return Response(ProductCursorPageSerializer(page).data)

    @extend_schema(responses=serializers.ListField(child=serializers.CharField()))
    @action(detail=False, methods=["get"])
    def categories(self, request: Request) -> Response:
        """GET /api/v1/products/categories/"""
        return Response(self._service.list_categories())

    # ------------------------------------------------------------------
    # Single product
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        return Response(ProductSerializer(self._service.get_by_id(pk)).data)

    @extend_schema(request=ProductInputSerializer, responses={201: ProductSerializer})
    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        dto = CreateProductDTO.model_validate(request.data)
        product = self._service.create(dto.category, dto.name)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ProductInputSerializer, responses=ProductSerializer)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/ (full replace)"""
        dto = UpdateProductDTO.model_validate(request.data)
        product = self._service.update(pk, dto.category, dto.name)
        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        self._service.delete_by_id(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
