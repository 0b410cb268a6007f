"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from photo_studio.api.admin import router as admin_router
from photo_studio.api.bookings import router as bookings_router
from photo_studio.api.notifications import router as notifications_router
from photo_studio.app_logging import configure_logging
from photo_studio.containers import AppContainer
from photo_studio.domain.errors import (
    BookingNotFound,
    InvalidRequest,
    InvalidTransition,
    NotificationNotFound,
    PermissionDenied,
    StudioError,
)

_STATUS_CODES: dict[type[StudioError], int] = {
    BookingNotFound: status.HTTP_404_NOT_FOUND,
    NotificationNotFound: status.HTTP_404_NOT_FOUND,
    PermissionDenied: status.HTTP_403_FORBIDDEN,
    InvalidTransition: status.HTTP_400_BAD_REQUEST,
    InvalidRequest: status.HTTP_400_BAD_REQUEST,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(bookings_router)
    app.include_router(notifications_router)
    app.include_router(admin_router)

    @app.exception_handler(StudioError)
    async def studio_error_handler(request: Request, exc: StudioError) -> JSONResponse:
        """Translate domain errors into HTTP responses."""
        status_code = _STATUS_CODES.get(
            type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Request failed",
                exc_info=exc,
                extra={"path": request.url.path},
            )
            return JSONResponse(
                status_code=status_code, content={"detail": "storage failure"}
            )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
