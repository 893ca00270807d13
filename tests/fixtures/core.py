from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from product_catalog.api.http.app import create_app
from product_catalog.api.http.app_data import ApplicationDependencies
from product_catalog.core.services import DbSessionService, ProductService
from product_catalog.entities.service.product import Product, ProductRepository
from product_catalog.entities.service.product import ProductTable  # noqa: F401
from product_catalog.runtime.config.config_data import PaginationConfig


@pytest.fixture
def engine() -> Generator[Engine]:
    """In-memory SQLite engine with a fresh schema for every test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a fresh database session for testing."""
    with Session(engine, expire_on_commit=False) as session:
        try:
            yield session
        finally:
            session.rollback()


@pytest.fixture
def repository(session: Session) -> ProductRepository:
    return ProductRepository(session)


@pytest.fixture
def database_service(engine: Engine) -> DbSessionService:
    return DbSessionService(engine=engine)


@pytest.fixture
def pagination() -> PaginationConfig:
    return PaginationConfig(default_size=10, max_size=100)


@pytest.fixture
def product_service(
    database_service: DbSessionService, pagination: PaginationConfig
) -> ProductService:
    return ProductService(database_service, pagination)


@pytest.fixture
def make_product(product_service: ProductService) -> Callable[[str, str], Product]:
    """Persist a product through the service and return it."""

    def _make(category: str, name: str) -> Product:
        return product_service.create(category, name)

    return _make


@pytest.fixture
def app(database_service: DbSessionService, product_service: ProductService) -> FastAPI:
    return create_app(
        ApplicationDependencies(
            database_service=database_service,
            product_service=product_service,
        )
    )


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient]:
    """Test client that lets unhandled errors reach the app's own handlers."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
