"""Unit tests for DjangoUnitOfWork and the seed command."""

from __future__ import annotations

from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command

from modules.core.unit_of_work import DjangoUnitOfWork, IUnitOfWork
from modules.customers.models import Customer
from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestDjangoUnitOfWork:
    def test_implements_interface(self):
        assert isinstance(DjangoUnitOfWork(), IUnitOfWork)

    def test_commits_on_success(self):
        with DjangoUnitOfWork().atomic():
            Product.objects.create(name="Kept", price=Decimal("1.00"))

        assert Product.objects.filter(name="Kept").exists()

    def test_rolls_back_and_reraises_on_error(self):
        with pytest.raises(RuntimeError, match="boom"):
            with DjangoUnitOfWork().atomic():
                Product.objects.create(name="Dropped", price=Decimal("1.00"))
                raise RuntimeError("boom")

        assert not Product.objects.filter(name="Dropped").exists()


class TestSeedDataCommand:
    def test_seeds_customers_and_products(self):
        out = StringIO()
        call_command("seed_data", stdout=out)

        assert Customer.objects.count() == 4
        assert Product.objects.count() == 6
        assert "Seed completed" in out.getvalue()

    def test_is_idempotent(self):
        call_command("seed_data", stdout=StringIO())
        call_command("seed_data", stdout=StringIO())

        assert Customer.objects.count() == 4
        assert Product.objects.count() == 6
