"""In-memory collaborators for exercising ``OrderService`` without the ORM.

``FakeUnitOfWork`` snapshots the fake stores when a scope opens and
restores them if the scope exits with an exception, mirroring a real
transaction rollback.
"""

from __future__ import annotations

import copy
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, List
from uuid import UUID, uuid4

import pytest

from modules.orders.services import OrderService


@dataclass
class FakeCustomer:
    id: UUID
    name: str = "Customer"


@dataclass
class FakeProduct:
    id: UUID
    name: str
    price: Decimal
    stock_quantity: int


@dataclass
class FakeOrderItem:
    product_id: UUID
    unit_price: Decimal
    quantity: int


@dataclass
class FakeOrder:
    id: UUID
    customer_id: UUID
    items: List[FakeOrderItem]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class FakeCustomerRepository:
    def __init__(self) -> None:
        self.customers: Dict[UUID, FakeCustomer] = {}

    def add(self, customer: FakeCustomer) -> FakeCustomer:
        self.customers[customer.id] = customer
        return customer

    def find_by_id(self, id):
        return self.customers.get(id)


class FakeProductRepository:
    def __init__(self) -> None:
        self.products: Dict[UUID, FakeProduct] = {}
        self.find_all_calls: List[set] = []
        self.fail_on_update = False

    def add(self, product: FakeProduct) -> FakeProduct:
        self.products[product.id] = product
        return product

    def find_by_id(self, id):
        product = self.products.get(id)
        return copy.copy(product) if product else None

    def find_all_by_id(self, ids, for_update=False):
        ids = set(ids)
        self.find_all_calls.append(ids)
        return [copy.copy(p) for pid, p in self.products.items() if pid in ids]

    def find_by_name(self, name):
        return next((p for p in self.products.values() if p.name == name), None)

    def update_quantity(self, updates):
        if self.fail_on_update:
            raise ConnectionError("product store unavailable")
        updated = []
        for update in updates:
            product = self.products.get(update.id)
            if product is None:
                continue
            product.stock_quantity = update.quantity
            updated.append(product)
        return updated


class FakeOrderRepository:
    def __init__(self) -> None:
        self.orders: Dict[UUID, FakeOrder] = {}

    def create(self, data):
        order = FakeOrder(
            id=uuid4(),
            customer_id=data["customer_id"],
            items=[FakeOrderItem(**item) for item in data["items"]],
        )
        self.orders[order.id] = order
        return order

    def find_by_id(self, id):
        return self.orders.get(id)


class FakeUnitOfWork:
    def __init__(self, *stores) -> None:
        self._stores = stores
        self.committed = 0
        self.rolled_back = 0

    @contextmanager
    def atomic(self):
        snapshots = [copy.deepcopy(store.__dict__) for store in self._stores]
        try:
            yield self
        except BaseException:
            for store, snapshot in zip(self._stores, snapshots):
                store.__dict__.clear()
                store.__dict__.update(snapshot)
            self.rolled_back += 1
            raise
        self.committed += 1


@pytest.fixture()
def customer_repo():
    return FakeCustomerRepository()


@pytest.fixture()
def product_repo():
    return FakeProductRepository()


@pytest.fixture()
def order_repo():
    return FakeOrderRepository()


@pytest.fixture()
def uow(order_repo, product_repo):
    return FakeUnitOfWork(order_repo, product_repo)


@pytest.fixture()
def fake_service(order_repo, customer_repo, product_repo, uow):
    return OrderService(
        order_repository=order_repo,
        customer_repository=customer_repo,
        product_repository=product_repo,
        unit_of_work=uow,
    )


@pytest.fixture()
def c1(customer_repo):
    return customer_repo.add(FakeCustomer(id=uuid4(), name="C1"))


@pytest.fixture()
def p1(product_repo):
    return product_repo.add(
        FakeProduct(id=uuid4(), name="P1", price=Decimal("10.00"), stock_quantity=5)
    )


@pytest.fixture()
def p2(product_repo):
    return product_repo.add(
        FakeProduct(id=uuid4(), name="P2", price=Decimal("5.00"), stock_quantity=2)
    )
