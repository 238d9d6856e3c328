"""Order service layer (Use Cases).

Orchestrates order creation: the customer and every requested product
are validated, stock is checked for all products, and only then is the
order stored and stock decremented.  Everything runs inside one unit of
work, so a rejected or failed call leaves customers, products and orders
exactly as they were.

Business rules enforced:
- The customer must exist.
- Every requested product must exist.
- No product may be sold beyond its current stock.
- Line items snapshot the product price at creation time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

import structlog

from modules.orders.exceptions import (
    InsufficientStock,
    InvalidCustomer,
    InvalidProduct,
    OrderNotFound,
)
from modules.products.dtos import UpdateProductQuantityDTO

if TYPE_CHECKING:
    from modules.core.unit_of_work import IUnitOfWork
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives its repositories and the unit of work via constructor
    injection (DIP); it never touches the ORM directly.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_repository: ICustomerRepository,
        product_repository: IProductRepository,
        unit_of_work: IUnitOfWork,
    ) -> None:
        self._order_repo = order_repository
        self._customer_repo = customer_repository
        self._product_repo = product_repository
        self._uow = unit_of_work

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create an order and decrement stock for every line item.

        Steps:
        1. Validate the customer exists.
        2. Load all requested products in one call (rows locked) and
           validate none is missing.
        3. Validate stock for every product before mutating anything.
        4. Store the order with a price snapshot per line item.
        5. Write the decremented stock levels.

        Raises:
            InvalidCustomer: the customer does not exist.
            InvalidProduct: at least one product does not exist.
            InsufficientStock: at least one product lacks stock.
        """
        log = logger.bind(customer_id=str(dto.customer_id), item_count=len(dto.items))
        log.info("order.creation_started")

        quantity_per_product = dto.quantities()

        with self._uow.atomic():
            customer = self._customer_repo.find_by_id(dto.customer_id)
            if customer is None:
                log.warning("order.invalid_customer")
                raise InvalidCustomer(f"Customer {dto.customer_id} not found.")

            products = self._product_repo.find_all_by_id(
                quantity_per_product, for_update=True
            )
            products_by_id = {product.id: product for product in products}

            missing = set(quantity_per_product) - set(products_by_id)
            if missing:
                log.warning("order.invalid_product", product_ids=sorted(map(str, missing)))
                raise InvalidProduct(
                    f"Products not found: {', '.join(sorted(map(str, missing)))}.",
                    product_ids=missing,
                )

            short = [
                product
                for product in products
                if product.stock_quantity < quantity_per_product[product.id]
            ]
            if short:
                log.warning(
                    "order.insufficient_stock",
                    product_ids=[str(product.id) for product in short],
                )
                raise InsufficientStock(
                    "Insufficient stock for: "
                    + ", ".join(
                        f"{product.id} (requested {quantity_per_product[product.id]}, "
                        f"available {product.stock_quantity})"
                        for product in short
                    )
                    + ".",
                    product_ids=[product.id for product in short],
                )

            stock_updates = [
                UpdateProductQuantityDTO(
                    id=product.id,
                    quantity=product.stock_quantity - quantity_per_product[product.id],
                )
                for product in products
            ]

            order = self._order_repo.create(
                {
                    "customer_id": customer.id,
                    "items": [
                        {
                            "product_id": item.product_id,
                            "unit_price": products_by_id[item.product_id].price,
                            "quantity": item.quantity,
                        }
                        for item in dto.items
                    ],
                }
            )

            self._product_repo.update_quantity(stock_updates)

        log.info("order.created", order_id=str(order.id))
        return order

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: UUID | str) -> Order:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.find_by_id(order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")
        return order
