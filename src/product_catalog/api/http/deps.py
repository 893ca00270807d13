"""FastAPI dependency implementations."""

from fastapi import Request

from product_catalog.api.http.app_data import ApplicationDependencies
from product_catalog.core.services import DbSessionService, ProductService


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_database_service(request: Request) -> DbSessionService:
    """Get the database session service instance."""
    return get_app_dependencies(request).database_service


def get_product_service(request: Request) -> ProductService:
    """Get the product service instance."""
    return get_app_dependencies(request).product_service
