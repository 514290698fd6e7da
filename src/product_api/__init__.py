"""Product API: a CRUD HTTP service for products backed by SQLModel."""

__version__ = "0.1.0"
