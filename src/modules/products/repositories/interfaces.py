"""Product repository interface (Dependency Inversion Principle).

The Service layer depends on this contract, never on the Django ORM
directly.  It exposes exactly the four operations the Product resource
needs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(ABC):
    """Repository contract for the Product table."""

    @abstractmethod
    def list(self) -> List[Product]:
        """Return every product in storage order."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, or ``None``."""

    @abstractmethod
    def save(self, entity: Product) -> Product:
        """Persist a product: insert when it has no id, update otherwise."""

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Remove a product by id; ``False`` when nothing was removed."""
