"""Entry point for the sync metadata store HTTP service."""

import time
import uuid
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from common.logging_config import setup_logging
from syncstore.config import SYNCSTORE_HOST, SYNCSTORE_PORT
from syncstore.database import Database
from syncstore.exceptions import (
    CapacityExceededError,
    ContentAlreadyExistsError,
    ContentNotFoundError,
    DeviceExistsError,
    DeviceNotFoundError,
    InvalidDeviceError,
    InvalidInputError,
    InvalidVersionError,
    NotAuthorizedError,
    SyncStoreException,
    VersionNotFoundError,
)
from syncstore.routes.content_routes import router as content_router
from syncstore.routes.device_routes import router as device_router
from syncstore.store import MetadataStore

logger = setup_logging('syncstore')

ERROR_STATUS = {
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    InvalidDeviceError: status.HTTP_403_FORBIDDEN,
    ContentNotFoundError: status.HTTP_404_NOT_FOUND,
    DeviceNotFoundError: status.HTTP_404_NOT_FOUND,
    VersionNotFoundError: status.HTTP_404_NOT_FOUND,
    ContentAlreadyExistsError: status.HTTP_409_CONFLICT,
    DeviceExistsError: status.HTTP_409_CONFLICT,
    CapacityExceededError: status.HTTP_409_CONFLICT,
    InvalidVersionError: status.HTTP_400_BAD_REQUEST,
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
}


def create_app(store: Optional[MetadataStore] = None) -> FastAPI:
    """
    Build the FastAPI application around a metadata store.

    Args:
        store: Store to serve. Defaults to one backed by the configured database file.
    """
    app = FastAPI(
        title="Sync Metadata Store",
        description="Device registry, version ledger and sync status tracking",
        version="1.0.0"
    )
    app.state.store = store or MetadataStore(Database())

    @app.on_event("startup")
    async def startup_event():
        logger.info("Sync metadata store starting up")
        app.state.store.database.init_schema()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.time()

        logger.info(f"Request started: {request.method} {request.url.path} [request_id={request_id}]")

        response = await call_next(request)

        duration = time.time() - start_time
        logger.info(
            f"Request completed: {request.method} {request.url.path} "
            f"status={response.status_code} duration={duration:.3f}s [request_id={request_id}]"
        )

        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(SyncStoreException)
    async def sync_store_exception_handler(request: Request, exc: SyncStoreException):
        request_id = getattr(request.state, 'request_id', 'unknown')
        status_code = ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
        if status_code >= 500:
            logger.error(f"Store error: {exc} [request_id={request_id}] path={request.url.path}", exc_info=True)
        else:
            logger.warning(f"{exc.code}: {exc} [request_id={request_id}] path={request.url.path}")
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "code": exc.code}
        )

    @app.get("/")
    async def root():
        return {"message": "Sync Metadata Store API", "status": "running"}

    app.include_router(device_router)
    app.include_router(content_router)

    return app


app = create_app()


def main() -> None:
    """
    Start the FastAPI server with uvicorn.
    """
    uvicorn.run(
        "syncstore.main:app",
        host=SYNCSTORE_HOST,
        port=SYNCSTORE_PORT,
    )


if __name__ == "__main__":
    main()
