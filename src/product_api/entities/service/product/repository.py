"""Data-access layer for products."""

from loguru import logger
from sqlmodel import Session, select

from .entity import Product
from .table import ProductTable

# Primary keys are stored as signed 64-bit integers
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


class ProductRepository:
    """Store for products: fetch-all, fetch-by-id, upsert and delete.

    The repository flushes but never commits; the caller owns the
    transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_all(self) -> list[Product]:
        rows = self._session.exec(select(ProductTable)).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def find_by_id(self, product_id: int) -> Product | None:
        if not _MIN_ID <= product_id <= _MAX_ID:
            return None
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def save(self, product: Product) -> Product:
        """Insert ``product`` or update the stored row with the same id."""
        row = None
        if product.id is not None:
            row = self._session.get(ProductTable, product.id)

        if row is None:
            row = ProductTable(
                id=product.id,
                name=product.name,
                description=product.description,
                price=product.price,
            )
        else:
            row.name = product.name
            row.description = product.description
            row.price = product.price

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        logger.debug("Saved product {}", row.id)
        return Product.model_validate(row, from_attributes=True)

    def delete(self, product: Product) -> None:
        row = self._session.get(ProductTable, product.id)
        if row is None:
            return
        self._session.delete(row)
        self._session.flush()
        logger.debug("Deleted product {}", product.id)
