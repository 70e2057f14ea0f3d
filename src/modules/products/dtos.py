"""Product DTOs and input validation.

``ProductInputDTO`` is the framework-agnostic contract between the API
layer and the Service layer (Pydantic v2, ``frozen=True``).  It carries
the same payload for create and full update.

``validate_product`` is the single entry point used by the views: it
collects *every* failing field instead of stopping at the first one and
returns them as ``FieldError`` tuples, so the caller decides how to
render them.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from modules.products.models import NAME_MAX_LENGTH, PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS

NOT_BLANK = "no debe estar vacío"
NOT_NULL = "no debe ser nulo"
MIN_ZERO = "debe ser mayor que o igual a 0"
INVALID_VALUE = "tiene un valor inválido"

PRICE_INTEGER_DIGITS = PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES


class FieldError(NamedTuple):
    field: str
    message: str


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class ProductInputDTO(BaseModel):
    """Immutable DTO for product create/update requests.

    Every field defaults to ``None`` and is validated anyway
    (``validate_default=True``) so a missing key and an explicit ``null``
    produce the same message.  Unknown keys (``id`` included) are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: Optional[str] = Field(default=None, validate_default=True)
    description: Optional[str] = Field(default=None, validate_default=True)
    price: Optional[Decimal] = Field(default=None, validate_default=True)

    @field_validator("name", "description")
    @classmethod
    def must_not_be_blank(cls, v: Optional[str]) -> str:
        if v is None or not v.strip():
            raise PydanticCustomError("not_blank", NOT_BLANK)
        return v

    @field_validator("name")
    @classmethod
    def name_must_fit_column(cls, v: str) -> str:
        if len(v) > NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "size", "el tamaño debe estar entre 0 y {max}", {"max": NAME_MAX_LENGTH}
            )
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Optional[Decimal]) -> Decimal:
        if v is None:
            raise PydanticCustomError("not_null", NOT_NULL)
        if v < 0:
            raise PydanticCustomError("min", MIN_ZERO)
        # Trailing zeros do not count against the column ("120.000", "0E-10").
        _, digits, exponent = v.normalize().as_tuple()
        fraction_digits = max(-exponent, 0)
        integer_digits = max(len(digits) + exponent, 0)
        if fraction_digits > PRICE_DECIMAL_PLACES or integer_digits > PRICE_INTEGER_DIGITS:
            raise PydanticCustomError(
                "digits",
                "numérico fuera de límites (<{integer} dígitos>.<{fraction} dígitos> esperado)",
                {"integer": PRICE_INTEGER_DIGITS, "fraction": PRICE_DECIMAL_PLACES},
            )
        return v


# ---------------------------------------------------------------------------
# Validation entry point
# ---------------------------------------------------------------------------

# Error types raised by the validators above; anything else is a type or
# parsing failure reported by Pydantic itself.
_CUSTOM_ERROR_TYPES = {"not_blank", "not_null", "min", "size", "digits"}


def validate_product(data: Any) -> Tuple[Optional[ProductInputDTO], List[FieldError]]:
    """Validate an incoming product payload.

    Returns ``(dto, [])`` on success and ``(None, errors)`` otherwise, with
    one ``FieldError`` per failing field.  A payload that is not a JSON
    object is validated as an empty one.
    """
    if not isinstance(data, Mapping):
        data = {}
    try:
        return ProductInputDTO.model_validate(dict(data)), []
    except ValidationError as exc:
        errors: List[FieldError] = []
        seen = set()
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "__all__"
            if field in seen:
                continue
            seen.add(field)
            message = error["msg"] if error["type"] in _CUSTOM_ERROR_TYPES else INVALID_VALUE
            errors.append(FieldError(field, message))
        return None, errors


def error_map(errors: List[FieldError]) -> dict[str, str]:
    """Render validation failures as ``{field: "El campo <field> <message>"}``."""
    return {err.field: f"El campo {err.field} {err.message}" for err in errors}
