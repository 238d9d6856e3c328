"""Unit tests for ProductService.

Covers:
- create_product: happy path, duplicate name.
- get_product: happy path, not found.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from modules.products.dtos import CreateProductDTO
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


@pytest.fixture()
def create_dto():
    return CreateProductDTO(name="Widget", price=Decimal("19.99"), stock_quantity=10)


class TestCreateProduct:
    def test_delegates_to_repository(self, service, mock_repo, create_dto):
        mock_repo.find_by_name.return_value = None
        mock_repo.create.return_value = Product(
            name="Widget", price=Decimal("19.99"), stock_quantity=10
        )

        product = service.create_product(create_dto)

        mock_repo.create.assert_called_once_with(
            {"name": "Widget", "price": Decimal("19.99"), "stock_quantity": 10}
        )
        assert product.name == "Widget"

    def test_duplicate_name_raises(self, service, mock_repo, create_dto):
        mock_repo.find_by_name.return_value = Product(name="Widget")

        with pytest.raises(ProductAlreadyExists):
            service.create_product(create_dto)
        mock_repo.create.assert_not_called()


class TestGetProduct:
    def test_returns_product(self, service, mock_repo):
        product = Product(name="Widget")
        mock_repo.find_by_id.return_value = product
        assert service.get_product(product.id) is product

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.find_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.get_product(uuid4())
