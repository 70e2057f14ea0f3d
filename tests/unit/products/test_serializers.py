"""Unit tests for ProductSerializer output."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product
from modules.products.serializers import ProductSerializer

pytestmark = pytest.mark.unit


class TestProductSerializer:
    def test_exposes_exactly_the_product_fields(self, sample_product):
        data = ProductSerializer(sample_product).data
        assert set(data) == {"id", "name", "description", "price"}

    def test_price_is_not_a_string(self, sample_product):
        data = ProductSerializer(sample_product).data
        assert data["price"] == Decimal("49.99")
        assert not isinstance(data["price"], str)

    def test_unsaved_product_has_null_id(self):
        product = Product(name="Lamp", description="Desk lamp", price=Decimal("15"))
        assert ProductSerializer(product).data["id"] is None
