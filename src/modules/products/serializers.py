"""Product DRF serializer for API output.

Input validation does not go through the serializer: the views call
``validate_product`` and hand a DTO to the Service layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "description", "price"]
        read_only_fields = ["id"]
