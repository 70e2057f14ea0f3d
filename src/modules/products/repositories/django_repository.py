"""Django ORM implementation of the Product repository.

Error handling follows the Null Object pattern: methods return ``None``
or ``False`` instead of raising, and the Service layer decides how to
translate a missing row into an API response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def list(self) -> List[Product]:
        return list(Product.objects.all())

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent ids and for ids the database
        backend cannot represent.
        """
        try:
            return Product.objects.filter(pk=id).first()
        except (ValueError, OverflowError):
            return None

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        entity.save()
        logger.info("product.saved", product_id=entity.id)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        # Queryset delete leaves any in-memory instance (and its pk) untouched.
        deleted, _ = Product.objects.filter(pk=id).delete()
        if deleted:
            logger.info("product.removed", product_id=id)
        return bool(deleted)
