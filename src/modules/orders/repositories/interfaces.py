"""Order repository interface.

Extends ``IRepository[Order]`` with atomic creation of the Order
aggregate (header + line items).

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The Order aggregate includes its OrderItem children.  Creation must
    be atomic: either the header and every item are stored, or nothing is.
    """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its items atomically.

        ``data`` must include ``customer_id`` and ``items`` (list of dicts
        with ``product_id``, ``quantity``, ``unit_price``).  Returns the
        stored order with its generated ``id`` and items loaded.
        """
