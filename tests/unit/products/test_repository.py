"""Unit tests for ProductDjangoRepository.

Covers:
- list, get_by_id, save (insert and update), delete.
- Edge cases (missing ids, ids out of the backend's range).
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_product(**overrides) -> Product:
    defaults = {
        "name": "Chair",
        "description": "Wooden chair",
        "price": Decimal("49.99"),
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.save()
    return product


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)

    def test_interface_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            IProductRepository()


# ===========================================================================
# list
# ===========================================================================


class TestList:
    def test_empty(self, repo):
        assert repo.list() == []

    def test_returns_all_in_id_order(self, repo):
        first = _make_product(name="First")
        second = _make_product(name="Second")
        assert [p.id for p in repo.list()] == [first.id, second.id]


# ===========================================================================
# get_by_id
# ===========================================================================


class TestGetById:
    def test_returns_product_when_found(self, repo):
        product = _make_product()
        result = repo.get_by_id(product.id)
        assert result is not None
        assert result.id == product.id
        assert result.name == "Chair"

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(999) is None

    def test_returns_none_for_out_of_range_id(self, repo):
        assert repo.get_by_id(2**70) is None


# ===========================================================================
# save
# ===========================================================================


class TestSave:
    def test_insert_assigns_id(self, repo):
        product = repo.save(
            Product(name="Lamp", description="Desk lamp", price=Decimal("15.00"))
        )
        assert product.id is not None
        assert Product.objects.filter(pk=product.id).exists()

    def test_update_keeps_id(self, repo):
        product = _make_product()
        original_id = product.id
        product.name = "Table"
        saved = repo.save(product)
        assert saved.id == original_id
        assert Product.objects.get(pk=original_id).name == "Table"
        assert Product.objects.count() == 1


# ===========================================================================
# delete
# ===========================================================================


class TestDelete:
    def test_removes_row(self, repo):
        product = _make_product()
        assert repo.delete(product.id) is True
        assert not Product.objects.filter(pk=product.id).exists()

    def test_returns_false_when_not_found(self, repo):
        assert repo.delete(999) is False

    def test_leaves_other_rows(self, repo):
        keep = _make_product(name="Keep")
        drop = _make_product(name="Drop")
        repo.delete(drop.id)
        assert list(Product.objects.values_list("id", flat=True)) == [keep.id]
