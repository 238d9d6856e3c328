"""Customer service layer (Use Cases).

Registers customers and reads them back.  Persistence is delegated to the
injected ``ICustomerRepository``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound

if TYPE_CHECKING:
    from uuid import UUID

    from modules.customers.dtos import CreateCustomerDTO
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    @transaction.atomic
    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Register a new customer.

        Raises:
            CustomerAlreadyExists: if the email is already in use.
        """
        if self._repo.find_by_email(dto.email):
            logger.warning("customer.duplicate_email")
            raise CustomerAlreadyExists("Email already registered.")

        customer = self._repo.create({"name": dto.name, "email": dto.email})
        logger.info("customer.created", customer_id=str(customer.id))
        return customer

    def get_customer(self, id: UUID | str) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.find_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        return customer
