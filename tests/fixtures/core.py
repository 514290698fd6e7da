from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.product_api.api.http.app import app
from src.product_api.api.http.app_data import ApplicationDependencies
from src.product_api.core.services.database.db_manage import DbManageService
from src.product_api.core.services.database.db_session import DbSessionService
from src.product_api.entities.service.product import ProductRepository
from src.product_api.runtime.config.config_data import DatabaseConfig

__all__ = [
    "session",
    "product_repository",
    "database_service",
    "client",
]


@pytest.fixture
def session() -> Generator[Session]:
    """Create a fresh database session for testing."""
    # Create a unique engine for each test to avoid state leaking between tests
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from src.product_api.entities.service.product import ProductTable  # noqa: F401

    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        try:
            yield session
        finally:
            session.rollback()
            session.close()
            engine.dispose()


@pytest.fixture
def product_repository(session: Session) -> ProductRepository:
    return ProductRepository(session)


@pytest.fixture
def database_service() -> Generator[DbSessionService]:
    """In-memory database service with the schema created."""
    service = DbSessionService(DatabaseConfig(url="sqlite://"))
    DbManageService(service.engine).create_all()
    try:
        yield service
    finally:
        service.dispose()


@pytest.fixture
def client(database_service: DbSessionService) -> Generator[TestClient]:
    """Test client wired to the in-memory database.

    The client is not entered as a context manager, so the lifespan hooks
    (which would open the configured database) do not run.
    """
    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
