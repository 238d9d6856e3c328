"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into HTTP status codes;
the view never swallows generic exceptions.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.products.dtos import CreateProductDTO
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    CreateProductSerializer,
    ProductSerializer,
)
from modules.products.services import ProductService


class ProductViewSet(ViewSet):
    """Register and fetch catalog products through ``ProductService``."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        create_serializer = CreateProductSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)

        data = create_serializer.validated_data
        try:
            dto = CreateProductDTO(
                name=data["name"],
                price=data["price"],
                stock_quantity=data["stock_quantity"],
            )
        except PydanticValidationError as exc:
            return Response(
                {"detail": str(exc), "code": "invalid_payload"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            product = self._service.create_product(dto)
        except ProductAlreadyExists as exc:
            return Response(
                {"detail": str(exc), "code": "product_already_exists"},
                status=status.HTTP_409_CONFLICT,
            )

        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound:
            return Response(
                {"detail": "Product not found.", "code": "product_not_found"},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(ProductSerializer(product).data)
