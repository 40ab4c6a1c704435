"""
Main FastAPI application for the garden service.

Wires the plant catalog layers together:
- Domain: Plant entity and error kinds
- Repositories: SQLAlchemy data access
- Services: PlantsManager business rules
- Routers: HTTP endpoints
"""

import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import settings
from .database import init_db
from .domain.exceptions import INVALID_PLANT_MESSAGE, ErrorKind, PlantCatalogException
from .logging_config import configure_logging
from .metrics import get_metrics, record_request
from .routers import health_router, plants_router

configure_logging(settings.LOG_LEVEL, use_json=settings.LOG_JSON)

logger = structlog.get_logger(__name__)

ERROR_STATUS_CODES = {
    ErrorKind.ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.VALIDATION: 422,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.STORAGE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting garden service", app_name=settings.APP_NAME)

    try:
        init_db()
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    logger.info("Garden service shut down complete")


app = FastAPI(
    title=settings.APP_NAME,
    description="Plant catalog service",
    version=health_router.SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
)


# Request ID middleware
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID for tracing."""
    request_id = request.headers.get("X-Request-ID", f"req-{id(request)}")

    structlog.contextvars.bind_contextvars(request_id=request_id)
    try:
        response = await call_next(request)
    finally:
        structlog.contextvars.clear_contextvars()

    response.headers["X-Request-ID"] = request_id
    return response


# Metrics middleware
@app.middleware("http")
async def track_metrics(request: Request, call_next):
    """Track Prometheus metrics."""
    start_time = time.time()

    response = await call_next(request)

    route = request.scope.get("route")
    endpoint = getattr(route, "path", request.url.path)
    record_request(request.method, endpoint, response.status_code, time.time() - start_time)

    return response


app.include_router(plants_router.router)
app.include_router(health_router.router)


@app.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    return get_metrics()


@app.get("/")
async def root():
    """Root endpoint with service information."""
    return {
        "service": settings.APP_NAME,
        "version": health_router.SERVICE_VERSION,
        "docs": "/api/docs",
        "health": "/api/v1/health",
        "ready": "/api/v1/ready",
    }


@app.exception_handler(PlantCatalogException)
async def catalog_exception_handler(request: Request, exc: PlantCatalogException):
    """Map domain exceptions to HTTP responses by error kind."""
    status_code = ERROR_STATUS_CODES.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)

    log = logger.error if status_code >= 500 else logger.info
    log(
        "Catalog request failed",
        path=request.url.path,
        method=request.method,
        kind=exc.kind.value,
        error=exc.message,
    )

    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.kind.value,
            "message": exc.message,
            "details": exc.details,
        },
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies in the same shape as plant validation errors."""
    errors = {}
    for error in exc.errors():
        # Drop the "body"/"query"/"path" prefix so keys match plant field names
        loc = [str(part) for part in error.get("loc", ())]
        field_name = ".".join(loc[1:]) or (loc[0] if loc else "request")
        errors[field_name] = error.get("msg", "invalid value")

    logger.info(
        "Request validation failed",
        path=request.url.path,
        method=request.method,
        fields=sorted(errors),
    )

    return JSONResponse(
        status_code=ERROR_STATUS_CODES[ErrorKind.VALIDATION],
        content={
            "error": ErrorKind.VALIDATION.value,
            "message": INVALID_PLANT_MESSAGE,
            "details": {"errors": errors},
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
