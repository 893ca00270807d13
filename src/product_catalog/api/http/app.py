"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from product_catalog.api.http.app_data import ApplicationDependencies
from product_catalog.api.http.errors import error_response, register_exception_handlers
from product_catalog.api.http.routers.health import router as health_router
from product_catalog.api.http.routers.service.product import router as product_router
from product_catalog.api.utils.app_startup import configure_logging
from product_catalog.core.services import DbManageService, DbSessionService, ProductService
from product_catalog.runtime.context import get_config


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return response


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return error_response(
                500,
                "INTERNAL_ERROR",
                "Internal server error.",
                headers={"X-Request-ID": request_id},
            )


# --- Lifecycle hooks ---
async def startup(app: FastAPI) -> None:
    """Build the application-wide dependencies unless they were supplied."""
    if getattr(app.state, "app_dependencies", None) is not None:
        logger.info("Using pre-configured application dependencies")
        return

    config = get_config()
    database_service = DbSessionService()
    if config.database.create_tables:
        DbManageService(database_service.engine).create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
        product_service=ProductService(database_service),
    )
    app.state.owns_dependencies = True
    logger.info("Application startup complete")


async def shutdown(app: FastAPI) -> None:
    if getattr(app.state, "owns_dependencies", False):
        app.state.app_dependencies.database_service.dispose()
        app.state.app_dependencies = None
        app.state.owns_dependencies = False
    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


def create_app(app_dependencies: ApplicationDependencies | None = None) -> FastAPI:
    """Assemble the FastAPI application.

    Args:
        app_dependencies: Services to serve requests with. When omitted they
            are built from the active configuration at startup.
    """
    config = get_config()
    is_production = config.app.environment == "production"

    if is_production and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app = FastAPI(
        title=config.app.title,
        version=config.app.version,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )
    app.state.app_dependencies = app_dependencies
    app.state.owns_dependencies = False

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.add_middleware(BaseHTTPMiddleware, dispatch=log_requests)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(product_router)
    return app


configure_logging()

app = create_app()

__all__ = ["app", "create_app", "startup", "shutdown"]
