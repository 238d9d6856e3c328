"""Customer DRF serializers for API input/output."""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CreateCustomerSerializer(serializers.Serializer):
    """Shape check for the registration payload.

    Email syntax is left to ``CreateCustomerDTO`` so that every business
    rule lives in one place.
    """

    name = serializers.CharField(max_length=255)
    email = serializers.CharField(max_length=254)


class CustomerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Customer
        fields = ["id", "name", "email", "created_at", "updated_at"]
        read_only_fields = fields
