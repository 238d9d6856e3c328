"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
``create`` is wrapped in ``transaction.atomic()`` so the Order aggregate
(Order + OrderItems) is persisted atomically; inside a caller's
transaction it becomes a savepoint of that transaction.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Order:
        items_data = data["items"]
        order = Order.objects.create(customer_id=data["customer_id"])

        items = [
            OrderItem(
                order=order,
                product_id=item_data["product_id"],
                quantity=item_data["quantity"],
                unit_price=item_data["unit_price"],
            )
            for item_data in items_data
        ]
        OrderItem.objects.bulk_create(items)

        order.total_amount = sum((item.subtotal for item in items), Decimal("0.00"))
        order.save(update_fields=["total_amount"])

        logger.info("order.stored", order_id=str(order.id), item_count=len(items))
        return self.find_by_id(order.id) or order

    def find_by_id(self, id: UUID | str) -> Optional[Order]:
        """Retrieve an order with eager-loaded relations.

        Uses ``select_related`` for the customer FK and ``prefetch_related``
        for items and their products.  Returns ``None`` for non-existent
        or invalid IDs.
        """
        try:
            return (
                Order.objects.select_related("customer")
                .prefetch_related("items__product")
                .filter(id=id)
                .first()
            )
        except (ValueError, ValidationError):
            return None
