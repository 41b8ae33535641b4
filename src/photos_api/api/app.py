"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, Response, status

from photos_api.api.photos import router as photos_router
from photos_api.app_logging import configure_logging
from photos_api.containers import AppContainer
from photos_api.domain.errors import (
    PhotoAccessDeniedError,
    PhotoNotFoundError,
    RateLimitExceededError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Photos API", version="1.0")
    app.state.container = container

    app.include_router(photos_router)

    @app.exception_handler(RateLimitExceededError)
    async def rate_limited(request: Request, exc: RateLimitExceededError) -> Response:
        logger.warning("Rate limited %s %s", request.method, request.url.path)
        return Response(status_code=status.HTTP_429_TOO_MANY_REQUESTS)

    @app.exception_handler(PhotoNotFoundError)
    async def not_found(request: Request, exc: PhotoNotFoundError) -> Response:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(PhotoAccessDeniedError)
    async def forbidden(request: Request, exc: PhotoAccessDeniedError) -> Response:
        return Response(status_code=status.HTTP_403_FORBIDDEN)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
