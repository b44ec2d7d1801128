"""Closed enumerations used by the product entity."""

from enum import Enum


class ProductCategory(str, Enum):
    """Category a product is filed under."""

    ACCESSORIES = "ACCESSORIES"
    FITNESS = "FITNESS"
    CLOTHING = "CLOTHING"
    ELECTRONICS = "ELECTRONICS"


class ProductInventoryStatus(str, Enum):
    """Stock availability of a product."""

    INSTOCK = "INSTOCK"
    LOWSTOCK = "LOWSTOCK"
    OUTOFSTOCK = "OUTOFSTOCK"


def member_names(enum_cls: type[Enum]) -> list[str]:
    """Names of every member, in declaration order."""
    return [member.name for member in enum_cls]
