"""Product DRF serializers for API input/output."""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class CreateProductSerializer(serializers.Serializer):
    """Shape check for the product payload; value rules live in the DTO."""

    name = serializers.CharField(max_length=255)
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    stock_quantity = serializers.IntegerField(required=False, default=0)


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "stock_quantity",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
