"""Order domain exceptions.

Raised by the Service Layer when an order request is rejected.  All
rejections share ``OrderRejected`` so callers can tell a bad request
apart from a storage fault, which is never wrapped.  Each subclass
carries a stable ``code`` the API layer puts in error responses.
"""

from __future__ import annotations

from typing import Iterable
from uuid import UUID


class OrderRejected(Exception):
    """The order request is invalid and was not applied."""

    code = "order_rejected"


class InvalidCustomer(OrderRejected):
    """The customer referenced by the order does not exist."""

    code = "invalid_customer"


class InvalidProduct(OrderRejected):
    """One or more requested products do not exist."""

    code = "invalid_product"

    def __init__(self, message: str, product_ids: Iterable[UUID] = ()) -> None:
        super().__init__(message)
        self.product_ids = sorted(product_ids, key=str)


class InsufficientStock(OrderRejected):
    """One or more products have less stock than requested."""

    code = "insufficient_stock"

    def __init__(self, message: str, product_ids: Iterable[UUID] = ()) -> None:
        super().__init__(message)
        self.product_ids = sorted(product_ids, key=str)


class OrderNotFound(Exception):
    """The requested order does not exist."""
