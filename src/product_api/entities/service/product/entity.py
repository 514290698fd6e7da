"""Entity: Product."""

from typing import Any

from pydantic import BaseModel, Field

from src.product_api.entities.core._base import Entity


class ProductInput(BaseModel):
    """Fields a client may send when creating or updating a product.

    Mirrors Product without the identifier. Any ``id`` sent by the client
    is ignored.
    """

    name: str | None = Field(default=None, description="Product name")
    description: str | None = Field(default=None, description="Product description")
    price: float | None = Field(default=None, description="Unit price")


class Product(Entity):
    """Product entity representing a product in the catalog.

    The identifier is assigned by the repository when the product is first
    saved and never changes afterwards.
    """

    name: str | None = Field(default=None, description="Product name")
    description: str | None = Field(default=None, description="Product description")
    price: float | None = Field(default=None, description="Unit price")

    def __eq__(self, other: Any) -> bool:
        """Compare products by identifier and business attributes."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.price == other.price
        )

    def __hash__(self) -> int:
        return hash((
            self.id,
            self.name,
            self.description,
            self.price,
        ))


def copy_input(source: ProductInput, target: Product) -> Product:
    """Copy every field carried by ``source`` onto ``target``.

    Fields left out of the input (or sent as null) keep their current value
    on ``target``. The identifier is never touched.
    """
    if source.name is not None:
        target.name = source.name
    if source.description is not None:
        target.description = source.description
    if source.price is not None:
        target.price = source.price
    return target
