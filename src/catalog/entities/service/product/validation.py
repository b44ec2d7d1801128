"""Field rules applied to product request bodies before the service is called."""

from collections.abc import Callable
from typing import Any

from src.catalog.core.exceptions import FieldViolation, ProductValidationError
from src.catalog.entities.service.product.schemas import (
    ProductCreate,
    ProductPatch,
    ProductPayload,
)

Check = Callable[[Any], bool]


def _not_blank(value: Any) -> bool:
    return bool(value.strip())


def _positive(value: Any) -> bool:
    return value > 0


def _not_negative(value: Any) -> bool:
    return value >= 0


def _rating_in_range(value: Any) -> bool:
    return 0 <= value <= 5


# (attribute, JSON field, message when missing); image and rating are optional
_PRESENCE_RULES: tuple[tuple[str, str, str], ...] = (
    ("code", "code", "Product code is required"),
    ("name", "name", "Product name is required"),
    ("description", "description", "Description is required"),
    ("price", "price", "Price is required"),
    ("quantity", "quantity", "Quantity is required"),
    ("inventory_status", "inventoryStatus", "Inventory Status is required"),
    ("category", "category", "Category is required"),
)

# (attribute, JSON field, check, message when the check fails)
_CONSTRAINT_RULES: tuple[tuple[str, str, Check, str], ...] = (
    ("code", "code", _not_blank, "Product code is required"),
    ("name", "name", _not_blank, "Product name is required"),
    ("price", "price", _positive, "Price must be greater than 0"),
    ("quantity", "quantity", _not_negative, "Quantity must be greater or equal to 0"),
    ("rating", "rating", _rating_in_range, "Rating must be between 0 and 5"),
)


def _check_constraints(payload: ProductPayload) -> list[FieldViolation]:
    violations = []
    for attr, field, check, message in _CONSTRAINT_RULES:
        value = getattr(payload, attr)
        if value is not None and not check(value):
            violations.append(FieldViolation(field, message))
    return violations


def validate_product_create(payload: ProductCreate) -> list[FieldViolation]:
    """Return every rule a create body breaks, in field order."""
    violations = [
        FieldViolation(field, message)
        for attr, field, message in _PRESENCE_RULES
        if getattr(payload, attr) is None
    ]
    return violations + _check_constraints(payload)


def validate_product_patch(payload: ProductPatch) -> list[FieldViolation]:
    """Return every rule a patch body breaks; absent fields are not checked."""
    return _check_constraints(payload)


def ensure_valid(violations: list[FieldViolation]) -> None:
    """Raise ``ProductValidationError`` when any rule was broken."""
    if violations:
        raise ProductValidationError(violations)
