"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, Response

from src.catalog.api.http.deps import get_product_service
from src.catalog.core.services import ProductService
from src.catalog.entities.service.product import Product, ProductCreate, ProductPatch
from src.catalog.entities.service.product.validation import (
    ensure_valid,
    validate_product_create,
    validate_product_patch,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=Product)
@router.post("/", response_model=Product, include_in_schema=False)
def create_product(
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a new product."""
    ensure_valid(validate_product_create(payload))
    return service.create_product(payload.to_entity())


@router.get("", response_model=list[Product])
@router.get("/", response_model=list[Product], include_in_schema=False)
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List all products."""
    return service.get_all_products()


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Get a product by ID."""
    return service.get_product(product_id)


@router.patch("/{product_id}", response_model=Product)
def update_product(
    product_id: int,
    patch: ProductPatch,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Apply the supplied fields to a product; omitted fields are kept."""
    ensure_valid(validate_product_patch(patch))
    return service.update_product(product_id, patch)


@router.delete("/{product_id}")
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product."""
    service.delete_product(product_id)
    return Response(status_code=200)
