"""Product database table model."""

from sqlalchemy import Column
from sqlalchemy import Enum as SAEnum
from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable
from src.catalog.entities.service.product.enums import (
    ProductCategory,
    ProductInventoryStatus,
)


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    Enum columns store the member names as text.
    """

    __tablename__ = "products"

    code: str
    name: str
    description: str
    price: float
    quantity: int
    inventory_status: ProductInventoryStatus = Field(
        sa_column=Column(
            SAEnum(ProductInventoryStatus, native_enum=False, length=32),
            nullable=False,
        )
    )
    category: ProductCategory = Field(
        sa_column=Column(
            SAEnum(ProductCategory, native_enum=False, length=32),
            nullable=False,
        )
    )
    image: str | None = None
    rating: float | None = None
