#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.errors import (
    RecommendationError,
    ProfileNotFoundError,
    RecommendationCancelled,
)

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class UserNotFoundException(ServiceException):
    """Raised when a referenced user does not exist."""
    pass


class MatchRequestNotFoundException(ServiceException):
    """Raised when responding to a match request that was never sent."""
    pass


class InvalidMatchActionException(ServiceException):
    """Raised when a like/reject/respond action is not allowed."""
    pass


def _error_response(status_code: int, error: str, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "type": error_type
        }
    )


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)

    status_code = 500
    if isinstance(exc, (UserNotFoundException, MatchRequestNotFoundException)):
        status_code = 404
    elif isinstance(exc, InvalidMatchActionException):
        status_code = 400

    return _error_response(status_code, str(exc), exc.__class__.__name__)


async def recommendation_exception_handler(
    request: Request,
    exc: RecommendationError
) -> JSONResponse:
    """
    Map recommendation core errors to HTTP responses.

    NotFound is a client error, cancellation/timeout is reported as
    unavailable, and infrastructure failures are server errors whose
    details stay in the log.
    """
    if isinstance(exc, ProfileNotFoundError):
        logger.info(f"Not found in {request.url.path}: {exc}")
        return _error_response(404, str(exc), exc.__class__.__name__)

    if isinstance(exc, RecommendationCancelled):
        logger.warning(f"Recommendation cancelled in {request.url.path}: {exc}")
        return _error_response(503, "Recommendation request was cancelled or timed out", exc.__class__.__name__)

    logger.error(f"Recommendation failed in {request.url.path}: {exc}", exc_info=True)
    return _error_response(500, "Failed to fetch recommendations", exc.__class__.__name__)


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return _error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return _error_response(500, "Internal server error", "InternalError")
