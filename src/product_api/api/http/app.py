"""FastAPI application for the product service."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from src.product_api import __version__
from src.product_api.api.http.app_data import ApplicationDependencies
from src.product_api.api.http.routers.health import router as health_router
from src.product_api.api.http.routers.service.product import router as product_router
from src.product_api.api.utils.app_startup import configure_logging
from src.product_api.core.services.database.db_manage import DbManageService
from src.product_api.core.services.database.db_session import DbSessionService
from src.product_api.runtime.context import get_config

REQUEST_ID_HEADER = "X-Request-ID"

config = get_config()
configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


is_production = config.app.environment == "production"

app = FastAPI(
    title="Product API",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if is_production else "/docs",
    redoc_url=None if is_production else "/redoc",
)

if is_production and "*" in config.app.cors.origins:
    raise RuntimeError(
        "CORS misconfigured: wildcard origins are not allowed in production"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.app.cors.origins,
    allow_credentials=config.app.cors.allow_credentials,
    allow_methods=config.app.cors.allow_methods,
    allow_headers=config.app.cors.allow_headers,
)


def server_error(request_id: str) -> JSONResponse:
    """The generic 500 body returned for every failure other than not-found."""
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal Server Error", "request_id": request_id},
        headers={REQUEST_ID_HEADER: request_id},
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    request.state.request_id = request_id
    started = time.perf_counter()

    def elapsed_ms() -> float:
        return round((time.perf_counter() - started) * 1000, 1)

    with logger.contextualize(
        request_id=request_id, method=request.method, path=request.url.path
    ):
        logger.info("request.start")
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.bind(
                status_code=500,
                duration_ms=elapsed_ms(),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return server_error(request_id)

        logger.bind(status_code=response.status_code, duration_ms=elapsed_ms()).info(
            "request.end"
        )
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        return response


@app.exception_handler(RequestValidationError)
async def unparseable_request(request: Request, exc: RequestValidationError):
    # Malformed bodies and path ids get the same answer as any other failure
    request_id = getattr(request.state, "request_id", None) or str(uuid.uuid4())
    logger.bind(errors=exc.errors()).warning("request.invalid")
    return server_error(request_id)


app.include_router(health_router)
app.include_router(product_router)


async def startup() -> None:
    current = get_config()
    logger.info("Starting up application in {} environment", current.app.environment)

    database_service = DbSessionService()
    if current.database.create_tables:
        DbManageService(database_service.engine).create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
    )


async def shutdown() -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies = app.state.app_dependencies
    app_dependencies.database_service.dispose()
