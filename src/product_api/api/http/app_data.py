from dataclasses import dataclass

from src.product_api.core.services.database.db_session import DbSessionService


@dataclass
class ApplicationDependencies:
    """Application-wide services created at startup and kept on ``app.state``."""

    database_service: DbSessionService
