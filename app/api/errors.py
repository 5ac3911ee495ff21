"""Exceptions raised by the HTTP layer and their JSON handlers.

Every error body has the same shape: {"message": "..."}.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RecommendationError(Exception):
    """A route failed before or outside the recommendation services."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationError(RecommendationError):
    """No verified user identity on a route that requires one."""

    status_code = 401


async def recommendation_error_handler(request: Request, exc: RecommendationError) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # malformed JSON bodies are rejected before the route runs
    logger.warning("%s %s -> 500: invalid request %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=500, content={"message": "Invalid request"})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # e.g. the Mongo client was never initialised
    logger.error("%s %s -> 500", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecommendationError, recommendation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
