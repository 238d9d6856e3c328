"""Product repository interface.

Extends ``IRepository[Product]`` with the batched reads and writes used
by order creation, plus the name look-up used by catalog registration.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Sequence
from uuid import UUID

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.dtos import UpdateProductQuantityDTO
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def find_all_by_id(
        self, ids: Iterable[UUID], for_update: bool = False
    ) -> List[Product]:
        """Retrieve every product whose ID is in ``ids`` in one query.

        Only matches are returned; callers detect unknown IDs by comparing
        the result against what they asked for.  With ``for_update`` the
        rows stay locked until the surrounding transaction ends.
        """

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Product]:
        """Retrieve a product by its exact name."""

    @abstractmethod
    def update_quantity(
        self, updates: Sequence[UpdateProductQuantityDTO]
    ) -> List[Product]:
        """Set the stock level of each listed product and return them.

        Current records are re-fetched before the new quantities are
        applied, so stale instances held by the caller are never saved.
        """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Product:
        """Persist a new product from ``name``, ``price`` and ``stock_quantity``."""
