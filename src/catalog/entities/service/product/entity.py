"""Entity: Product."""

from typing import Any

from pydantic import Field

from src.catalog.entities.core._base import Entity
from src.catalog.entities.service.product.enums import (
    ProductCategory,
    ProductInventoryStatus,
)


class Product(Entity):
    """Product entity representing a catalog item.

    This is the fully-populated domain model returned by the service layer.
    Partial payloads use the shapes in ``schemas`` instead.
    """

    code: str = Field(description="Product code")
    name: str = Field(description="Product name")
    description: str = Field(description="Free-text description")
    price: float = Field(description="Unit price, strictly positive")
    quantity: int = Field(description="Units in stock")
    inventory_status: ProductInventoryStatus = Field(description="Stock availability")
    category: ProductCategory = Field(description="Product category")
    image: str | None = Field(default=None, description="Image URL")
    rating: float | None = Field(default=None, description="Rating between 0 and 5")

    def _business_key(self) -> tuple:
        return (
            self.id,
            self.code,
            self.name,
            self.description,
            self.price,
            self.quantity,
            self.inventory_status,
            self.category,
            self.image,
            self.rating,
        )

    def __eq__(self, other: Any) -> bool:
        """Compare products by identity and every business attribute."""
        if not isinstance(other, Product):
            return False
        return self._business_key() == other._business_key()

    def __hash__(self) -> int:
        return hash(self._business_key())
