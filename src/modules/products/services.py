"""Product service layer (Use Cases).

Adds products to the catalog and reads them back.  Persistence is
delegated to the injected ``IProductRepository``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.products.exceptions import ProductAlreadyExists, ProductNotFound

if TYPE_CHECKING:
    from uuid import UUID

    from modules.products.dtos import CreateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product after enforcing name uniqueness.

        Raises:
            ProductAlreadyExists: if the name is already taken.
        """
        log = logger.bind(name=dto.name)

        if self._repo.find_by_name(dto.name):
            log.warning("product.duplicate_name")
            raise ProductAlreadyExists(f"Product '{dto.name}' already registered.")

        product = self._repo.create(
            {
                "name": dto.name,
                "price": dto.price,
                "stock_quantity": dto.stock_quantity,
            }
        )
        log.info("product.created", product_id=str(product.id))
        return product

    def get_product(self, id: UUID | str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.find_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product
