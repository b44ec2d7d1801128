"""Product catalog HTTP application."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.errors import (
    register_exception_handlers,
    unexpected_error_response,
)
from src.catalog.api.http.routers.health import router as health_router
from src.catalog.api.http.routers.service.product import router as product_router
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.core.services import DbManageService, DbSessionService
from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import get_config

__all__ = ["create_app"]

REQUEST_ID_HEADER = "X-Request-ID"

_STATIC_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}
_HSTS = "max-age=31536000; includeSubDomains; preload"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds browser hardening headers; HSTS only in production."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        for name, value in _STATIC_SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        if request.app.state.config.app.environment == "production":
            response.headers.setdefault("Strict-Transport-Security", _HSTS)
        return response


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


async def log_requests(request: Request, call_next) -> Response:
    """Tag the request with a correlation id, time it, and hide unexpected errors."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    started = time.perf_counter()

    def elapsed_ms() -> float:
        return round((time.perf_counter() - started) * 1000, 1)

    with logger.contextualize(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        client_ip=_client_ip(request),
    ):
        logger.info("{} {} started", request.method, request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "{} {} failed after {} ms",
                request.method,
                request.url.path,
                elapsed_ms(),
            )
            return unexpected_error_response(headers={REQUEST_ID_HEADER: request_id})

        logger.info(
            "{} {} -> {} in {} ms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms(),
        )
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        return response


def create_app(
    config: ConfigData | None = None,
    database_service: DbSessionService | None = None,
) -> FastAPI:
    """Build the API application.

    Args:
        config: Configuration to use; defaults to the current context's
        database_service: Pre-built database service; one is created from
            ``config`` on startup when omitted and disposed on shutdown
    """
    main_config = config or get_config()
    configure_logging(main_config)
    is_production = main_config.app.environment == "production"

    cors = main_config.app.cors
    if is_production and "*" in cors.origins:
        raise RuntimeError(
            "CORS misconfigured: '*' origins cannot be combined with credentials in production"
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_service = database_service or DbSessionService(main_config)
        app.state.app_dependencies = ApplicationDependencies(
            database_service=db_service
        )
        DbManageService(db_service).create_all()
        logger.info("{} started ({})", main_config.app.name, main_config.app.environment)
        try:
            yield
        finally:
            logger.info("{} shutting down", main_config.app.name)
            if database_service is None:
                db_service.dispose()

    app = FastAPI(
        title="Product Catalog API",
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )
    app.state.config = main_config

    # Last added runs first: log_requests wraps everything below it
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )
    app.middleware("http")(log_requests)

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(product_router)
    return app
