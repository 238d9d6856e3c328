"""Unit tests for Order DTOs.

Covers:
- CreateOrderItemDTO: quantity validation, frozen immutability.
- CreateOrderDTO: items list validation, duplicate product check.
"""

from __future__ import annotations

from uuid import uuid4

import pytest
from pydantic import ValidationError

from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO

pytestmark = pytest.mark.unit


class TestCreateOrderItemDTO:
    def test_valid_item(self):
        dto = CreateOrderItemDTO(product_id=uuid4(), quantity=3)
        assert dto.quantity == 3

    def test_accepts_string_uuid(self):
        product_id = uuid4()
        dto = CreateOrderItemDTO(product_id=str(product_id), quantity=1)
        assert dto.product_id == product_id

    def test_zero_quantity_raises(self):
        with pytest.raises(ValidationError, match="Quantity must be at least 1"):
            CreateOrderItemDTO(product_id=uuid4(), quantity=0)

    def test_negative_quantity_raises(self):
        with pytest.raises(ValidationError, match="Quantity must be at least 1"):
            CreateOrderItemDTO(product_id=uuid4(), quantity=-1)

    def test_is_immutable(self):
        dto = CreateOrderItemDTO(product_id=uuid4(), quantity=2)
        with pytest.raises(ValidationError):
            dto.quantity = 5


class TestCreateOrderDTO:
    def test_valid_order(self):
        dto = CreateOrderDTO(
            customer_id=uuid4(),
            items=[
                CreateOrderItemDTO(product_id=uuid4(), quantity=1),
                CreateOrderItemDTO(product_id=uuid4(), quantity=2),
            ],
        )
        assert len(dto.items) == 2

    def test_empty_items_raises(self):
        with pytest.raises(ValidationError, match="at least one item"):
            CreateOrderDTO(customer_id=uuid4(), items=[])

    def test_duplicate_products_raise(self):
        product_id = uuid4()
        with pytest.raises(ValidationError, match="Duplicate product IDs"):
            CreateOrderDTO(
                customer_id=uuid4(),
                items=[
                    CreateOrderItemDTO(product_id=product_id, quantity=1),
                    CreateOrderItemDTO(product_id=product_id, quantity=4),
                ],
            )

    def test_malformed_customer_id_raises(self):
        with pytest.raises(ValidationError):
            CreateOrderDTO(
                customer_id="not-a-uuid",
                items=[CreateOrderItemDTO(product_id=uuid4(), quantity=1)],
            )

    def test_quantities_keyed_by_product(self):
        first, second = uuid4(), uuid4()
        dto = CreateOrderDTO(
            customer_id=uuid4(),
            items=[
                CreateOrderItemDTO(product_id=first, quantity=2),
                CreateOrderItemDTO(product_id=second, quantity=1),
            ],
        )
        assert dto.quantities() == {first: 2, second: 1}
