"""Service layer: database plumbing and product business logic."""

from .database import DbManageService, DbSessionService
from .product import ProductService

__all__ = ["DbManageService", "DbSessionService", "ProductService"]
