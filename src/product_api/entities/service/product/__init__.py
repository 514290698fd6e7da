"""Entity package: Product."""

from .entity import Product, ProductInput, copy_input
from .repository import ProductRepository
from .table import ProductTable

__all__ = ["Product", "ProductInput", "ProductRepository", "ProductTable", "copy_input"]
