"""
Translate Google API failures into CommunicationError.

Used by adapters so that nothing above them sees HttpError, httplib2 or
google-auth exceptions. Failures are reported once, never retried.
"""

from functools import wraps
from typing import TypeVar, Callable, ParamSpec

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import Error as GoogleApiClientError

from logging_config import logger
from models import DriveError, CommunicationError

T = TypeVar("T")
P = ParamSpec("P")


# Everything the client stack raises for a failed remote call
COMMUNICATION_EXCEPTIONS: tuple[type[Exception], ...] = (
    GoogleApiClientError,
    GoogleAuthError,
    httplib2.HttpLib2Error,
    OSError,  # ConnectionError, TimeoutError, socket errors
)


def _get_http_status(exception: Exception) -> int | None:
    """
    Extract HTTP status code from exception if available.

    Works with googleapiclient.errors.HttpError and similar.
    """
    if hasattr(exception, "resp") and hasattr(exception.resp, "status"):
        status = exception.resp.status
        # httplib2.Response keeps status as int; header dicts may hold a str
        if isinstance(status, str) and status.isdigit():
            return int(status)
        if isinstance(status, int):
            return status

    if hasattr(exception, "status_code"):
        status = exception.status_code
        if isinstance(status, int):
            return status

    return None


def _describe(exception: Exception, status: int | None) -> str:
    if status == 401:
        return "authentication failed (token expired or revoked)"
    if status == 403:
        return "permission denied or quota exceeded"
    if status == 404:
        return "remote item not found"
    if status == 429:
        return "rate limited by Drive"
    if status is not None and status >= 500:
        return "Drive service error"
    return str(exception) or type(exception).__name__


def _convert_to_drive_error(exception: Exception, action: str) -> DriveError:
    """Convert an exception to a CommunicationError if not already a DriveError."""
    if isinstance(exception, DriveError):
        return exception

    status = _get_http_status(exception)
    details = {"http_status": status} if status is not None else {}
    return CommunicationError(f"unable to {action}: {_describe(exception, status)}", details)


def translate_errors(action: str) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator: convert remote-call failures to CommunicationError.

    Args:
        action: Human phrase for the message, e.g. "list folder contents"

    Example:
        @translate_errors("create folder")
        def create_folder(self, name: str, parent_id: str) -> str:
            ...
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except COMMUNICATION_EXCEPTIONS as e:
                logger.error(f"{func.__name__} failed: {e}")
                raise _convert_to_drive_error(e, action) from e

        return wrapper

    return decorator
