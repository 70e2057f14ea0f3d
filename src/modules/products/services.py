"""Product service layer (Use Cases).

Delegates persistence to the injected ``IProductRepository``.  A missing
product is an expected outcome, not a fault: lookups, updates and deletes
return ``None`` instead of raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import ProductInputDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    Input is assumed to be validated already (see ``validate_product``).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        return self._repo.list()

    def get_product(self, id: int) -> Optional[Product]:
        return self._repo.get_by_id(id)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: ProductInputDTO) -> Product:
        """Persist a new product and return it with its assigned id."""
        product = Product(
            name=dto.name,
            description=dto.description,
            price=dto.price,
        )
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id)
        return product

    def update_product(self, id: int, dto: ProductInputDTO) -> Optional[Product]:
        """Overwrite name, description and price of an existing product.

        Read-modify-write: storage is not touched when the product does
        not exist.  The stored ``id`` always wins over anything the
        caller sent.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            logger.info("product.update_missing", product_id=id)
            return None

        product.name = dto.name
        product.description = dto.description
        product.price = dto.price

        product = self._repo.save(product)
        logger.info("product.updated", product_id=product.id)
        return product

    def delete_product(self, id: int) -> Optional[Product]:
        """Delete a product and return its state as it was before removal."""
        product = self._repo.get_by_id(id)
        if product is None:
            logger.info("product.delete_missing", product_id=id)
            return None
        self._repo.delete(product.id)
        logger.info("product.deleted", product_id=product.id)
        return product
