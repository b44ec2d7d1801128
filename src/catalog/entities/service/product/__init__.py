"""Entity package: Product."""

from .entity import Product
from .enums import ProductCategory, ProductInventoryStatus
from .repository import ProductRepository
from .schemas import ProductCreate, ProductPatch
from .table import ProductTable

__all__ = [
    "Product",
    "ProductCategory",
    "ProductCreate",
    "ProductInventoryStatus",
    "ProductPatch",
    "ProductRepository",
    "ProductTable",
]
