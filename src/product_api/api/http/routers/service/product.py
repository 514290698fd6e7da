"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from loguru import logger
from sqlmodel import Session

from src.product_api.api.http.deps import get_db_session, get_product_repository
from src.product_api.entities.service.product import (
    Product,
    ProductInput,
    ProductRepository,
    copy_input,
)

NOT_FOUND_MESSAGE = "Product not found"
DELETED_MESSAGE = "Product Deleted"

_NOT_FOUND_RESPONSE = {
    status.HTTP_404_NOT_FOUND: {
        "description": NOT_FOUND_MESSAGE,
        "content": {"text/plain": {"example": NOT_FOUND_MESSAGE}},
    }
}

router = APIRouter(prefix="/products", tags=["products"])


def _not_found(product_id: int) -> PlainTextResponse:
    logger.info("Product {} not found", product_id)
    return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)


@router.get("", response_model=list[Product])
def list_products(
    repository: ProductRepository = Depends(get_product_repository),
) -> list[Product]:
    """List all products."""
    return repository.find_all()


@router.get("/{product_id}", response_model=Product, responses=_NOT_FOUND_RESPONSE)
def get_product(
    product_id: int,
    repository: ProductRepository = Depends(get_product_repository),
) -> Product | PlainTextResponse:
    """Get a product by ID."""
    product = repository.find_by_id(product_id)
    if product is None:
        return _not_found(product_id)
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    product_input: ProductInput,
    session: Session = Depends(get_db_session),
    repository: ProductRepository = Depends(get_product_repository),
) -> Product:
    """Create a new product from the submitted fields."""
    product = copy_input(product_input, Product())
    created_product = repository.save(product)
    session.commit()
    logger.info("Created product {}", created_product.id)
    return created_product


@router.put("/{product_id}", response_model=Product, responses=_NOT_FOUND_RESPONSE)
def update_product(
    product_id: int,
    product_input: ProductInput,
    session: Session = Depends(get_db_session),
    repository: ProductRepository = Depends(get_product_repository),
) -> Product | PlainTextResponse:
    """Overwrite the submitted fields of an existing product."""
    product = repository.find_by_id(product_id)
    if product is None:
        return _not_found(product_id)

    updated_product = repository.save(copy_input(product_input, product))
    session.commit()
    logger.info("Updated product {}", product_id)
    return updated_product


@router.delete(
    "/{product_id}",
    response_class=PlainTextResponse,
    responses=_NOT_FOUND_RESPONSE,
)
def delete_product(
    product_id: int,
    session: Session = Depends(get_db_session),
    repository: ProductRepository = Depends(get_product_repository),
) -> PlainTextResponse:
    """Delete a product."""
    product = repository.find_by_id(product_id)
    if product is None:
        return _not_found(product_id)

    repository.delete(product)
    session.commit()
    logger.info("Deleted product {}", product_id)
    return PlainTextResponse(DELETED_MESSAGE, status_code=status.HTTP_200_OK)
