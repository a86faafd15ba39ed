import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from order_notifier.core.exceptions import BaseApplicationException
from order_notifier.core.settings import get_app_settings
from order_notifier.database import SessionLocal
from order_notifier.events.runtime import initialise_event_system, shutdown_event_system
from order_notifier.middleware.request_logging import RequestLoggingMiddleware
from order_notifier.routers import event_system, order_events

settings = get_app_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    manager = await initialise_event_system(settings.event_config_path, SessionLocal)
    logger.info("Event system ready: %s", manager.get_status())

    yield

    await shutdown_event_system()
    logger.info("Event system stopped")


app = FastAPI(
    title="Order Notifier",
    lifespan=lifespan
)

app.add_middleware(RequestLoggingMiddleware, log_requests=True)


# ============================================================================
# GLOBAL EXCEPTION HANDLERS
# ============================================================================

@app.exception_handler(BaseApplicationException)
async def application_exception_handler(request: Request, exc: BaseApplicationException):
    """Handler for the application's own exceptions"""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(f"Application exception: {exc.error_code} - {exc.message}", extra={
        "error_code": exc.error_code,
        "details": exc.details,
        "path": str(request.url),
        "method": request.method
    })
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Handler for FastAPI request validation errors"""
    logger.warning(f"Request validation error: {exc.errors()}", extra={
        "path": str(request.url),
        "method": request.method
    })
    return JSONResponse(
        status_code=422,
        content={
            "error_code": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": jsonable_encoder(exc.errors()),
            "status_code": 422
        }
    )


app.include_router(order_events.router)
app.include_router(event_system.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
