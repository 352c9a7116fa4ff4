"""Entry point for the Registry service."""

import time
import uuid

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from common.logging_config import setup_logging
from registry import config
from registry.exceptions import (
    AlreadyRegisteredError,
    ArithmeticOverflowError,
    InvalidInputError,
    OutOfRangeError,
    PausedError,
    ScribeException,
    UnauthorizedError,
)
from registry.routes.admin_routes import router as admin_router
from registry.routes.event_routes import router as event_router
from registry.routes.file_routes import router as file_router
from registry.schemas.common import ErrorResponse
from registry.service_locator import set_record_registry
from registry.services.deployment import deploy_registry

logger = setup_logging('registry')

app = FastAPI(
    title="Scribe Registry",
    description="Content-addressed proof-of-existence registry",
    version="1.0.0"
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Middleware to log all HTTP requests and responses.
    """
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    start_time = time.time()

    logger.info(
        f"Request started: {request.method} {request.url.path} [request_id={request_id}]"
    )

    response = await call_next(request)

    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} "
        f"status={response.status_code} duration={duration:.3f}s [request_id={request_id}]"
    )

    response.headers["X-Request-ID"] = request_id

    return response


@app.on_event("startup")
async def startup_event():
    """
    Initialize the store on application startup.
    """
    logger.info("Registry service starting up...")
    set_record_registry(deploy_registry(config.OPERATOR_ADDRESS))


def _error_response(request: Request, exc: Exception, status_code: int, code: str, level: str = "warning"):
    request_id = getattr(request.state, 'request_id', 'unknown')
    message = f"{type(exc).__name__}: {exc} [request_id={request_id}] path={request.url.path}"
    if level == "error":
        logger.error(message, exc_info=True)
    else:
        logger.warning(message)
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(detail=str(exc), code=code).model_dump()
    )


@app.exception_handler(PausedError)
async def paused_handler(request: Request, exc: PausedError):
    return _error_response(request, exc, status.HTTP_423_LOCKED, "REGISTRY_PAUSED")


@app.exception_handler(UnauthorizedError)
async def unauthorized_handler(request: Request, exc: UnauthorizedError):
    return _error_response(request, exc, status.HTTP_403_FORBIDDEN, "UNAUTHORIZED_OPERATOR")


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return _error_response(request, exc, status.HTTP_400_BAD_REQUEST, "INVALID_INPUT")


@app.exception_handler(AlreadyRegisteredError)
async def already_registered_handler(request: Request, exc: AlreadyRegisteredError):
    return _error_response(request, exc, status.HTTP_409_CONFLICT, "ALREADY_REGISTERED")


@app.exception_handler(OutOfRangeError)
async def out_of_range_handler(request: Request, exc: OutOfRangeError):
    return _error_response(request, exc, status.HTTP_404_NOT_FOUND, "ORDINAL_OUT_OF_RANGE")


@app.exception_handler(ArithmeticOverflowError)
async def overflow_handler(request: Request, exc: ArithmeticOverflowError):
    return _error_response(
        request, exc, status.HTTP_500_INTERNAL_SERVER_ERROR, "ARITHMETIC_OVERFLOW", level="error"
    )


@app.exception_handler(ScribeException)
async def scribe_exception_handler(request: Request, exc: ScribeException):
    return _error_response(
        request, exc, status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", level="error"
    )


app.include_router(file_router)
app.include_router(admin_router)
app.include_router(event_router)


@app.get("/")
async def root():
    """
    Root endpoint for health check.
    """
    return {"message": "Scribe Registry API", "status": "running"}


@app.get("/health")
async def health_check():
    """
    Health check endpoint for Docker healthcheck.
    """
    return {"status": "healthy", "service": "registry"}


def main() -> None:
    """
    Start the FastAPI server with uvicorn.
    """
    uvicorn.run(
        "registry.main:app",
        host=config.REGISTRY_HOST,
        port=config.REGISTRY_PORT,
    )


if __name__ == "__main__":
    main()
