"""
Centralized error handlers for FastAPI.

Maps comment domain errors to HTTP responses.  No stack traces or storage
details are exposed to clients.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from comment_api.errors import (
    CommentError,
    CommentFetchError,
    CommentNotFoundError,
    CommentNotImplementedError,
)
from comment_api.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=error).model_dump())


def register_error_handlers(app: FastAPI) -> None:
    """Register the comment error handlers on *app*."""

    @app.exception_handler(CommentNotFoundError)
    async def handle_not_found(_request: Request, exc: CommentNotFoundError) -> JSONResponse:
        logger.warning("Comment not found: %s", exc.comment_id)
        return _error_response(404, "Comment not found")

    @app.exception_handler(CommentFetchError)
    async def handle_fetch_failed(_request: Request, exc: CommentFetchError) -> JSONResponse:
        # Fetch failures have always been reported to clients as absent resources.
        logger.warning("Comment fetch failed: %s", exc.message)
        return _error_response(404, "Comment not found")

    @app.exception_handler(CommentNotImplementedError)
    async def handle_not_implemented(
        _request: Request, exc: CommentNotImplementedError
    ) -> JSONResponse:
        logger.warning("Store capability missing: %s", exc.operation)
        return _error_response(501, "Not implemented")

    @app.exception_handler(CommentError)
    async def handle_comment_error(_request: Request, exc: CommentError) -> JSONResponse:
        logger.error("Comment operation failed: %s", exc.message)
        return _error_response(500, "Internal server error")
