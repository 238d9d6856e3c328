"""Customer repository interface.

Extends ``IRepository[Customer]`` with the look-ups needed to register
customers without duplicating an email address.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email address (case-insensitive)."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Customer:
        """Persist a new customer from ``name`` and ``email``."""
