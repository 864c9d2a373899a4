from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette import status
from scalar_fastapi import get_scalar_api_reference
from app.schemas.response import ErrorDetail
from app.utils.api_response import JSONResponse, error
from app.configs.settings import settings
from app.core.exceptions import AppError, NotFoundError
from app.utils import setup_logging, get_logger
from app.middlewares import init_sentry
from app.databases import mongodb
from app.models import DOCUMENT_MODELS
from app.api import folder_router, health_router

logger = get_logger(__name__)


async def _setup_logging() -> None:
    """Setup application logging configuration"""
    setup_logging(
        level="DEBUG" if settings.APP_DEBUG else "INFO",
        app_name=settings.APP_NAME,
        enable_json=settings.APP_ENV == "prod",
        log_file="logs/app.log" if settings.APP_ENV == "prod" else None
    )
    logger.info("Logging configuration initialized")


async def _setup_sentry() -> None:
    """Setup Sentry monitoring for production environment"""
    if not settings.SENTRY_DSN:
        logger.warning("Sentry DSN not configured - monitoring disabled")
        return

    if settings.APP_ENV != "prod":
        logger.info("Sentry monitoring disabled - not in production environment")
        return

    try:
        init_sentry(
            dsn=settings.SENTRY_DSN,
            environment=settings.APP_ENV,
            release=settings.RELEASE,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            send_default_pii=settings.SENTRY_SEND_DEFAULT_PII
        )
        logger.info("Sentry monitoring initialized for production environment")
    except Exception as e:
        # Monitoring is optional; keep starting up
        logger.error(f"Failed to initialize Sentry: {str(e)}")


async def _setup_databases() -> None:
    """Initialize MongoDB and Beanie"""
    try:
        await mongodb.connect(document_models=DOCUMENT_MODELS)
        logger.info("MongoDB connection established successfully")
    except Exception as e:
        logger.error(f"Failed to initialize MongoDB: {str(e)}")
        raise


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager"""
    logger.info(f"Starting {settings.APP_NAME}...")

    try:
        await _setup_logging()
        await _setup_sentry()
        await _setup_databases()

        logger.info("Application startup completed successfully")

        yield

    except Exception as e:
        logger.error(f"Application startup failed: {str(e)}")
        raise
    finally:
        logger.info(f"Shutting down {settings.APP_NAME}...")
        try:
            await mongodb.disconnect()
            logger.info("Application shutdown completed successfully")
        except Exception as e:
            logger.error(f"Error during shutdown: {str(e)}")


async def _handle_app_error(request: Request, exc: AppError) -> Response:
    """Handle custom application errors"""
    if isinstance(exc, NotFoundError):
        return Response(status_code=exc.status_code)

    errors = [ErrorDetail(**e) for e in exc.errors] if exc.errors else None
    return error(exc.message, exc.status_code, errors)


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions from Starlette"""
    return JSONResponse(
        content={"message": str(exc.detail)},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors"""
    errors = []
    for err in exc.errors():
        location = ".".join(
            str(x) for x in err.get("loc", [])
            if x not in ("body",)
        )
        errors.append(ErrorDetail(
            code=err.get("type", "validation_error"),
            message=err.get("msg", ""),
            field=location or None
        ))

    return error("Validation error", status.HTTP_422_UNPROCESSABLE_ENTITY, errors)


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Store or programming faults: log with traceback, answer with a generic 500"""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return error("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)


def install_cors_middleware(app: FastAPI) -> None:
    """Install CORS middleware for the application"""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_CREDENTIALS,
        allow_methods=settings.CORS_METHODS,
        allow_headers=settings.CORS_HEADERS,
        expose_headers=settings.CORS_EXPOSE_HEADERS,
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Install all exception handlers for the application"""
    app.exception_handler(AppError)(_handle_app_error)
    app.exception_handler(StarletteHTTPException)(_handle_http_exception)
    app.exception_handler(RequestValidationError)(_handle_validation_error)
    app.exception_handler(Exception)(_handle_unexpected_error)

    logger.info("Exception handlers installed successfully")


def _create_api_prefix(endpoint_name: str) -> str:
    """Create API prefix for router endpoints"""
    return f"/api/v1/{endpoint_name}"


def include_routers(app: FastAPI) -> None:
    """Include all API routers with proper configuration"""
    routers_config = [
        (folder_router, "folders"),
    ]
    if settings.APP_ENV == "dev":
        @app.get("/scalar", include_in_schema=False)
        async def scalar_html():
            return get_scalar_api_reference(
                openapi_url=app.openapi_url,
                scalar_proxy_url="https://proxy.scalar.com",
            )

    for router, prefix_name in routers_config:
        app.include_router(
            router,
            prefix=_create_api_prefix(prefix_name)
        )

    app.include_router(health_router)

    logger.info(f"Included {len(routers_config)} API routers successfully")


def create_app(use_lifespan: bool = True) -> FastAPI:
    """Create and configure FastAPI application with all components"""
    app = FastAPI(
        title=settings.APP_NAME,
        description="Noteful API - per-user folders",
        version=settings.APP_VERSION,
        debug=settings.APP_DEBUG,
        lifespan=lifespan if use_lifespan else None,
        docs_url="/docs" if settings.APP_DEBUG else None,
        redoc_url="/redoc" if settings.APP_DEBUG else None,
    )

    install_cors_middleware(app)

    install_exception_handlers(app)

    include_routers(app)

    logger.info("FastAPI application created and configured successfully")
    return app
