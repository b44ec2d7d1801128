"""Product repository: data access for product rows."""

from sqlmodel import Session, select

from src.catalog.core.exceptions import ProductNotFoundError
from src.catalog.entities.service.product.entity import Product
from src.catalog.entities.service.product.table import ProductTable


class ProductRepository:
    """Data-access layer for products.

    Each write commits immediately so the returned entity reflects the
    persisted row, including the store-assigned id.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, product: Product) -> Product:
        """Insert a new row; any id on ``product`` is ignored."""
        row = ProductTable.model_validate(product.model_dump(exclude={"id"}))
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def list_all(self) -> list[Product]:
        rows = self._session.exec(select(ProductTable)).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def get(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def save(self, product: Product) -> Product:
        """Write every field of an existing product back to its row."""
        if product.id is None:
            raise ValueError("Cannot save a product that has no id")
        row = self._session.get(ProductTable, product.id)
        if row is None:
            raise ProductNotFoundError(product.id)

        row.sqlmodel_update(product.model_dump(exclude={"id"}))
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def delete(self, product: Product) -> None:
        row = self._session.get(ProductTable, product.id)
        if row is None:
            raise ProductNotFoundError(product.id)
        self._session.delete(row)
        self._session.commit()
