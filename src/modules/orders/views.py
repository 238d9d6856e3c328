"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.
Order rejections are caught and translated into HTTP status codes;
storage faults and other generic exceptions propagate untouched.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.unit_of_work import DjangoUnitOfWork
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO
from modules.orders.exceptions import (
    InsufficientStock,
    InvalidCustomer,
    InvalidProduct,
    OrderNotFound,
    OrderRejected,
)
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import CreateOrderSerializer, OrderSerializer
from modules.orders.services import OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository

REJECTION_STATUS = {
    InvalidCustomer: status.HTTP_404_NOT_FOUND,
    InvalidProduct: status.HTTP_404_NOT_FOUND,
    InsufficientStock: status.HTTP_409_CONFLICT,
}


class OrderViewSet(ViewSet):
    """ViewSet for Order operations.

    Composes ``OrderService`` from the Django repositories and unit of work.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
            product_repository=ProductDjangoRepository(),
            unit_of_work=DjangoUnitOfWork(),
        )

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        create_serializer = CreateOrderSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)

        data = create_serializer.validated_data
        try:
            dto = CreateOrderDTO(
                customer_id=data["customer_id"],
                items=[
                    CreateOrderItemDTO(
                        product_id=item["product_id"],
                        quantity=item["quantity"],
                    )
                    for item in data["items"]
                ],
            )
        except PydanticValidationError as exc:
            return Response(
                {"detail": str(exc), "code": "invalid_payload"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            order = self._service.create_order(dto)
        except OrderRejected as exc:
            return Response(
                {"detail": str(exc), "code": exc.code},
                status=REJECTION_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST),
            )

        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = self._service.get_order(pk)
        except OrderNotFound:
            return Response(
                {"detail": "Order not found.", "code": "order_not_found"},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(OrderSerializer(order).data)
