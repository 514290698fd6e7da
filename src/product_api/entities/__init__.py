"""Entities organized by business concept.

Each entity has its own package containing:
- entity.py: Domain model and transfer object
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .service.product import Product, ProductInput, ProductRepository, ProductTable

__all__ = [
    "Product",
    "ProductInput",
    "ProductRepository",
    "ProductTable",
]
