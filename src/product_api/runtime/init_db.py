"""Database initialization script."""

from src.product_api.core.services.database.db_manage import DbManageService


def init_db(drop: bool = False) -> None:
    """Create all database tables, optionally dropping existing ones first."""
    manage_service = DbManageService()
    if drop:
        manage_service.drop_all()
    manage_service.create_all()


if __name__ == "__main__":
    init_db()
