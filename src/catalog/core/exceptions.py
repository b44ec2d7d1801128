"""Domain exceptions raised below the HTTP layer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldViolation:
    """A single failed field rule, keyed by the JSON field name."""

    field: str
    message: str


class CatalogError(Exception):
    """Base class for catalog errors."""


class ProductNotFoundError(CatalogError):
    """Raised when no product exists for the requested id."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product not found with id {product_id}")


class ProductValidationError(CatalogError):
    """Raised when a request body breaks one or more field rules."""

    def __init__(self, violations: Sequence[FieldViolation]):
        self.violations = list(violations)
        super().__init__(
            "; ".join(f"{v.field}: {v.message}" for v in self.violations)
        )

    def as_dict(self) -> dict[str, str]:
        """Map each field to its message; the first violation per field wins."""
        errors: dict[str, str] = {}
        for violation in self.violations:
            errors.setdefault(violation.field, violation.message)
        return errors


class MalformedEnumError(CatalogError):
    """Raised when a closed-enumeration field receives an unknown literal."""

    def __init__(
        self, label: str, plural: str, value: object, allowed: Sequence[str]
    ):
        self.label = label
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"Invalid {label}: {value}. Valid {plural} are: [{', '.join(self.allowed)}]"
        )
