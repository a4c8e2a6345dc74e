"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from src.selectshop.api.http.app_data import ApplicationDependencies
from src.selectshop.api.http.errors import error_response, register_exception_handlers
from src.selectshop.api.http.routers import folders, health, products, users
from src.selectshop.api.utils.app_startup import configure_logging
from src.selectshop.core.services import DbManageService, DbSessionService, JwtService
from src.selectshop.runtime.context import get_config

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}
HSTS = "max-age=31536000; includeSubDomains; preload"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        if get_config().app.environment == "production":
            response.headers.setdefault("Strict-Transport-Security", HSTS)
        return response


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


async def log_requests(request: Request, call_next):
    """Tag every log line of a request with its id and log its outcome."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    started = time.perf_counter()

    def elapsed_ms() -> float:
        return round((time.perf_counter() - started) * 1000, 1)

    with logger.contextualize(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        client_ip=_client_ip(request),
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
            response = error_response("Internal Server Error", 500)
        else:
            logger.bind(
                status_code=response.status_code, duration_ms=elapsed_ms()
            ).info("request.end")

    response.headers.setdefault("X-Request-ID", request_id)
    return response


def build_dependencies() -> ApplicationDependencies:
    """Create the process-wide services and make sure the schema exists."""
    database_service = DbSessionService()
    DbManageService(database_service.engine).create_all()
    return ApplicationDependencies(database_service=database_service, jwt_service=JwtService())


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.app_dependencies is None:
        app.state.app_dependencies = build_dependencies()
    logger.info("SelectShop API starting ({})", get_config().app.environment)
    try:
        yield
    finally:
        logger.info("SelectShop API stopping")
        app.state.app_dependencies.database_service.engine.dispose()


def create_app(dependencies: ApplicationDependencies | None = None) -> FastAPI:
    """Build the application.

    Args:
        dependencies: Pre-built services, used by tests to inject an
            in-memory database. Built on startup when omitted.
    """
    config = get_config()
    configure_logging()

    cors = config.app.cors
    production = config.app.environment == "production"
    if production and "*" in cors.origins and cors.allow_credentials:
        raise RuntimeError("Wildcard CORS origin cannot be combined with credentials in production")

    app = FastAPI(
        title="SelectShop API",
        lifespan=lifespan,
        docs_url=None if production else "/docs",
        redoc_url=None if production else "/redoc",
    )
    app.state.app_dependencies = dependencies

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
        expose_headers=cors.expose_headers,
    )
    app.middleware("http")(log_requests)
    register_exception_handlers(app)

    app.include_router(health.router)
    for router in (users.router, folders.router, products.router):
        app.include_router(router, prefix="/api")

    return app


app = create_app()

__all__ = ["app", "create_app"]
