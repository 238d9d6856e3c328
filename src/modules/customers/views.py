"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into HTTP status codes;
the view never swallows generic exceptions.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.customers.dtos import CreateCustomerDTO
from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import (
    CreateCustomerSerializer,
    CustomerSerializer,
)
from modules.customers.services import CustomerService


class CustomerViewSet(ViewSet):
    """Register and fetch customers through ``CustomerService``."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        create_serializer = CreateCustomerSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)

        data = create_serializer.validated_data
        try:
            dto = CreateCustomerDTO(name=data["name"], email=data["email"])
        except PydanticValidationError as exc:
            return Response(
                {"detail": str(exc), "code": "invalid_payload"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            customer = self._service.create_customer(dto)
        except CustomerAlreadyExists as exc:
            return Response(
                {"detail": str(exc), "code": "customer_already_exists"},
                status=status.HTTP_409_CONFLICT,
            )

        return Response(
            CustomerSerializer(customer).data, status=status.HTTP_201_CREATED
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        try:
            customer = self._service.get_customer(pk)
        except CustomerNotFound:
            return Response(
                {"detail": "Customer not found.", "code": "customer_not_found"},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(CustomerSerializer(customer).data)
