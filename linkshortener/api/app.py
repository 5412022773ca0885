"""FastAPI application factory for the short URL gateway

The gateway owns no business logic: it translates HTTP requests into
LinkService calls and service errors into HTTP status codes.
"""

import time
import logging
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from linkshortener.service import LinkService
from linkshortener.api.routes import router
from linkshortener.api.responses import response_500, response_not_implemented
from linkshortener.constants import ENDPOINT_NOT_IMPLEMENTED, UNKNOWN_INTERNAL_SERVER_ERROR


logger = logging.getLogger(__name__)


def create_app(service: LinkService, lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]] | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        service (LinkService):
            Link service shared by all requests.
        lifespan (Callable | None):
            Optional startup/shutdown context manager, owned by the process host.

    Returns:
        FastAPI: Configured app
    """
    app = FastAPI(
        title='Link Shortener',
        description='Short-link service backed by Redis',
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.service = service

    @app.middleware('http')
    async def log_requests(request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        logger.info('Incoming request.', extra={'method': request.method, 'path': request.url.path})

        response = await call_next(request)

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.info(
            'Request served.',
            extra={'method': request.method, 'path': request.url.path, 'status': response.status_code, 'durationMs': duration_ms},
        )
        return response

    @app.exception_handler(StarletteHTTPException)
    async def not_implemented_handler(request: Request, exc: StarletteHTTPException) -> Response:
        logger.info(
            'No endpoint for request. Responding with %s.',
            exc.status_code,
            extra={'method': request.method, 'path': request.url.path},
        )
        return response_not_implemented(exc.status_code, error_code=ENDPOINT_NOT_IMPLEMENTED)

    @app.exception_handler(Exception)
    async def unknown_error_handler(request: Request, exc: Exception) -> Response:
        logger.exception('Unhandled exception. Responding with 500.', extra={'method': request.method, 'path': request.url.path})
        return response_500(error_code=UNKNOWN_INTERNAL_SERVER_ERROR)

    app.include_router(router)
    return app
