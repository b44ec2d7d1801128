"""Request payload shapes for the product endpoints.

Every field is optional so that presence can be checked explicitly by the
rules in ``validation``; absent and ``null`` both mean "not supplied". Enum
fields keep their enum type, so an unknown literal fails while the body is
parsed and never reaches the rule checks. Numbers must be finite JSON numbers;
booleans and numeric strings are rejected rather than coerced.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel

from src.catalog.entities.service.product.entity import Product
from src.catalog.entities.service.product.enums import (
    ProductCategory,
    ProductInventoryStatus,
)


class ProductPayload(BaseModel):
    """Product fields as supplied by a client, each one optional."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    code: str | None = Field(default=None, description="Product code")
    name: str | None = Field(default=None, description="Product name")
    description: str | None = Field(default=None, description="Free-text description")
    price: StrictFloat | None = Field(default=None, description="Unit price")
    quantity: StrictInt | None = Field(default=None, description="Units in stock")
    inventory_status: ProductInventoryStatus | None = Field(
        default=None, description="Stock availability"
    )
    category: ProductCategory | None = Field(default=None, description="Category")
    image: str | None = Field(default=None, description="Image URL")
    rating: StrictFloat | None = Field(
        default=None, description="Rating between 0 and 5"
    )


class ProductCreate(ProductPayload):
    """Body of a create request."""

    def to_entity(self) -> Product:
        """Build the unsaved entity. Call only after the create rules pass."""
        return Product.model_validate(self.model_dump(exclude_none=True))


class ProductPatch(ProductPayload):
    """Body of a partial update; unset fields keep their stored value."""
