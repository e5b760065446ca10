"""FastAPI application entry point."""

from contextlib import asynccontextmanager
import uuid

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from artha.api.deps import SettingsDep
from artha.api.main import api_router, public_router
from artha.core.base_models import utcnow
from artha.core.config import settings
from artha.core.db import check_database
from artha.core.exceptions import AppException, InternalError, ValidationError
from artha.core.logging import bind_request_id, get_logger, setup_logging
from artha.core.rate_limit import limiter
from artha.core.tasks import task_stats

setup_logging()
logger = get_logger(__name__)


def custom_generate_unique_id(route: APIRoute) -> str:
    """Generate unique operation IDs for OpenAPI schema. Format: {tag}-{route_name}"""
    if route.tags:
        return f"{route.tags[0]}-{route.name}"
    return route.name


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(
        "application_startup",
        environment=settings.ENVIRONMENT,
        debug=settings.DEBUG,
        port=settings.PORT,
        translation_provider=settings.TRANSLATION_PROVIDER_NAME,
    )
    yield
    logger.info("application_shutdown", background_tasks=task_stats.snapshot())


def _validation_message(exc: RequestValidationError) -> tuple[str, str | None]:
    errors = exc.errors()
    if not errors:
        return "Invalid request", None
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(loc) or None
    if first.get("type") == "missing":
        return "Missing required fields", field
    if first.get("type") == "extra_forbidden":
        return f"Unexpected field: {field}", field
    return first.get("msg", "Invalid request"), field


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
        lifespan=lifespan,
        generate_unique_id_function=custom_generate_unique_id,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request, exc: AppException
    ) -> JSONResponse:
        """Handle all AppException subclasses with consistent JSON format."""
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "app_exception",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            details=exc.details,
            path=str(request.url.path),
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Render schema failures as 400 in the AppException format."""
        message, field = _validation_message(exc)
        error = ValidationError(message, field=field)
        logger.warning(
            "request_validation_failed",
            path=str(request.url.path),
            field=field,
            error_count=len(exc.errors()),
        )
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Log unexpected faults server-side; the caller gets a generic 500."""
        logger.exception(
            "unhandled_exception",
            error_type=type(exc).__name__,
            path=str(request.url.path),
        )
        error = InternalError()
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        """Add unique request ID to each request for tracing."""
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        bind_request_id(request_id)

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        """Add security headers to all responses."""
        response = await call_next(request)

        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"

        # Prevent clickjacking
        response.headers["X-Frame-Options"] = "DENY"

        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        # Tokens and profiles must not be cached
        response.headers["Cache-Control"] = "no-store"

        if settings.ENVIRONMENT == "production":
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )

        return response

    if settings.all_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.all_cors_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
            allow_headers=[
                "Authorization",
                "Content-Type",
                "X-Request-ID",
                "Accept",
                "Origin",
            ],
            expose_headers=["X-Request-ID"],
        )
        logger.info("cors_configured", origins=settings.all_cors_origins)

    app.include_router(api_router, prefix=settings.API_PREFIX)
    app.include_router(public_router)

    @app.get("/", tags=["health"])
    def root(config: SettingsDep):
        """Service banner with the main endpoints."""
        return {
            "message": f"{config.PROJECT_NAME} is running",
            "database": "connected" if check_database() else "disconnected",
            "endpoints": {
                "health": "GET /health",
                "translate": "POST /translate",
                "auth/register": f"POST {config.API_PREFIX}/auth/register",
                "auth/login": f"POST {config.API_PREFIX}/auth/login",
                "user/profile": f"GET {config.API_PREFIX}/user/profile (protected)",
            },
            "timestamp": utcnow().isoformat(),
        }

    @app.get("/health", tags=["health"], status_code=status.HTTP_200_OK)
    def health(config: SettingsDep):
        """Liveness check. Always 200; dependencies are reported, not enforced."""
        return {
            "status": "ok",
            "service": config.PROJECT_NAME,
            "database": "connected" if check_database() else "disconnected",
            "provider": config.TRANSLATION_PROVIDER_NAME,
            "backgroundTasks": task_stats.snapshot(),
            "timestamp": utcnow().isoformat(),
        }

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("artha.main:app", host=settings.HOST, port=settings.PORT)
