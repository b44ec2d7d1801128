from loguru import logger

from src.catalog.core.exceptions import ProductNotFoundError
from src.catalog.core.utils.merge import copy_non_null_fields
from src.catalog.entities.service.product.entity import Product
from src.catalog.entities.service.product.repository import ProductRepository
from src.catalog.entities.service.product.schemas import ProductPatch


class ProductService:
    """Business operations over products.

    Inputs are assumed to have passed the boundary rules already; this layer
    only enforces existence and the merge-then-save flow for updates.
    """

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    def create_product(self, candidate: Product) -> Product:
        """Persist a new product and return it with its assigned id."""
        created = self._repository.create(candidate)
        logger.info("Created product {} ({})", created.id, created.code)
        return created

    def get_all_products(self) -> list[Product]:
        return self._repository.list_all()

    def get_product(self, product_id: int) -> Product:
        """Return the product with ``product_id``.

        Raises:
            ProductNotFoundError: If no such product exists
        """
        product = self._repository.get(product_id)
        if product is None:
            logger.debug("Product {} not found", product_id)
            raise ProductNotFoundError(product_id)
        return product

    def update_product(self, product_id: int, patch: ProductPatch) -> Product:
        """Overlay the supplied fields of ``patch`` onto the stored product.

        Fields left unset on the patch keep their stored value and the id is
        always the stored one.

        Raises:
            ProductNotFoundError: If no such product exists
        """
        existing = self.get_product(product_id)
        merged = copy_non_null_fields(patch, existing, exclude=("id",))
        merged.id = product_id
        updated = self._repository.save(merged)
        logger.info(
            "Updated product {} fields={}",
            product_id,
            sorted(patch.model_dump(exclude_none=True)),
        )
        return updated

    def delete_product(self, product_id: int) -> None:
        """Remove the product with ``product_id``.

        Raises:
            ProductNotFoundError: If no such product exists
        """
        product = self.get_product(product_id)
        self._repository.delete(product)
        logger.info("Deleted product {}", product_id)
