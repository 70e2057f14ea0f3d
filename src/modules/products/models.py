"""Product model.

A single table with storage-assigned integer ids.  Field rules
(non-blank name/description, non-negative price) are checked by
``validate_product`` before a row ever reaches the ORM; the CHECK
constraint on ``price`` is the last line at the database.
"""

from __future__ import annotations

from django.db import models

NAME_MAX_LENGTH = 255
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2


class Product(models.Model):
    """Product row: ``id`` is assigned on first save and never changes."""

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=NAME_MAX_LENGTH)
    description = models.TextField()
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
