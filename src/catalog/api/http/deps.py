"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import DbSessionService, ProductService
from src.catalog.entities.service.product import ProductRepository
from src.catalog.runtime.config.config_data import ConfigData


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a request-scoped session, committed or rolled back at the end."""
    with database_service.session_scope() as session:
        yield session


def get_product_repository(
    session: Session = Depends(get_db_session),
) -> ProductRepository:
    return ProductRepository(session)


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductService:
    return ProductService(repository)


def get_app_config(request: Request) -> ConfigData:
    """Get the configuration the application was built with."""
    return request.app.state.config
