"""
Translation of service-layer failures into HTTP errors.

Every endpoint funnels catalog and store errors through
``to_http_exception`` so the status codes stay consistent: a missing
row is 404, a blocked delete is 409 and anything the store refused is
400 with the store's message in ``detail``.
"""

import logging

from fastapi import HTTPException, status

from ..core.errors import (
    AmbiguousMatchError,
    ConflictError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


def to_http_exception(exc: Exception) -> HTTPException:
    """Return the HTTPException that reports ``exc`` to the client."""
    if isinstance(exc, (NotFoundError, AmbiguousMatchError)):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, ConflictError):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    logger.warning("Request failed with %s: %s", status_code, exc)
    return HTTPException(status_code=status_code, detail=str(exc))


def no_rows() -> HTTPException:
    """404 used by list endpoints when the query returned nothing."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail="Could not find any rows"
    )
