"""Translation of domain exceptions into HTTP errors."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

from tour_admin.domain.exceptions import (
    ActionInProgressError,
    ApiError,
    AuthenticationRequiredError,
    BlockedActionError,
    DraftValidationError,
    EntityNotFoundError,
    NetworkError,
    NoDataToExportError,
    UnsupportedOperationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[Exception], int], ...] = (
    (DraftValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (BlockedActionError, status.HTTP_409_CONFLICT),
    (ActionInProgressError, status.HTTP_409_CONFLICT),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (NoDataToExportError, status.HTTP_404_NOT_FOUND),
    (ApiError, status.HTTP_502_BAD_GATEWAY),
    (NetworkError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (UnsupportedOperationError, status.HTTP_405_METHOD_NOT_ALLOWED),
    (AuthenticationRequiredError, status.HTTP_401_UNAUTHORIZED),
)

_HANDLED = tuple(error for error, _ in _STATUS_BY_ERROR)


def to_http_exception(exc: Exception) -> HTTPException:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            detail = getattr(exc, "message", None) or str(exc)
            return HTTPException(status_code=status_code, detail=detail)
    raise TypeError(f"No HTTP mapping for {type(exc).__name__}")


@contextmanager
def domain_errors() -> Iterator[None]:
    """Re-raise known domain exceptions as HTTPException."""
    try:
        yield
    except _HANDLED as exc:
        http_exc = to_http_exception(exc)
        logger.info("%s -> %d: %s", type(exc).__name__, http_exc.status_code, http_exc.detail)
        raise http_exc from exc
