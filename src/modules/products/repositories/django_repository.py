"""Django ORM implementation of the Product repository.

Error handling follows the Null Object pattern: look-ups return ``None``
or an empty list instead of raising, the Service Layer decides how to
treat missing products.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from modules.products.dtos import UpdateProductQuantityDTO
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def find_by_id(self, id: UUID | str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def find_all_by_id(
        self, ids: Iterable[UUID], for_update: bool = False
    ) -> List[Product]:
        """Batched look-up by primary key.

        Rows are returned sorted by PK.  When ``for_update`` is set they
        are locked in that same order, which keeps two concurrent orders
        touching overlapping products from deadlocking each other.
        """
        queryset = Product.objects.filter(id__in=list(ids)).order_by("id")
        if for_update:
            queryset = queryset.select_for_update()
        return list(queryset)

    def find_by_name(self, name: str) -> Optional[Product]:
        return Product.objects.filter(name=name.strip()).first()

    @transaction.atomic
    def update_quantity(
        self, updates: Sequence[UpdateProductQuantityDTO]
    ) -> List[Product]:
        quantity_per_product = {update.id: update.quantity for update in updates}
        products = self.find_all_by_id(quantity_per_product, for_update=True)

        now = timezone.now()
        for product in products:
            product.stock_quantity = quantity_per_product[product.id]
            product.updated_at = now

        Product.objects.bulk_update(products, ["stock_quantity", "updated_at"])

        logger.info(
            "product.stock_updated",
            product_ids=[str(product.id) for product in products],
        )
        return products

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Product:
        product = Product(
            name=data["name"],
            price=data["price"],
            stock_quantity=data.get("stock_quantity", 0),
        )
        product.save()
        return product
