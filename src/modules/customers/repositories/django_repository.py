"""Django ORM implementation of the Customer repository.

Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, the Service Layer decides what a missing customer means.
"""

from __future__ import annotations

from typing import Any, Dict, Optional
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def find_by_id(self, id: UUID | str) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        try:
            return Customer.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def find_by_email(self, email: str) -> Optional[Customer]:
        return Customer.objects.filter(email__iexact=email.strip()).first()

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Customer:
        customer = Customer(name=data["name"], email=data["email"])
        customer.save()
        logger.info("customer.saved", customer_id=str(customer.id))
        return customer
