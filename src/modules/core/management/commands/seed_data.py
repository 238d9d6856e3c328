from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.customers.models import Customer
from modules.products.models import Product


class Command(BaseCommand):
    help = "Seed database with demo customers and catalog products."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        customers = self._seed_customers()
        products = self._seed_products()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"customers={len(customers)}, "
                f"products={len(products)}"
            )
        )

    def _seed_customers(self) -> list[Customer]:
        self.stdout.write("Creating customers...")
        customers: list[Customer] = []
        seed_customers = [
            ("Ana Souza", "ana@example.com"),
            ("Bruno Lima", "bruno@example.com"),
            ("Carla Mendes", "carla@example.com"),
            ("Daniel Costa", "daniel@example.com"),
        ]
        for name, email in seed_customers:
            customer, _ = Customer.objects.get_or_create(
                email=email, defaults={"name": name}
            )
            customers.append(customer)
        return customers

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        catalog = [
            ("Monitor 27\"", Decimal("1299.90"), 15),
            ("Mechanical Keyboard", Decimal("399.90"), 40),
            ("Gaming Mouse", Decimal("249.90"), 60),
            ("A4 Paper", Decimal("29.90"), 500),
            ("Blue Pen", Decimal("4.90"), 1000),
            ("Notebook Stand", Decimal("149.90"), 0),
        ]
        for name, price, stock in catalog:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={"price": price, "stock_quantity": stock},
            )
            products.append(product)
        return products
