"""
Error models.

HttpError subclasses are the domain-level failures accessors raise; the
transport layer maps status_code onto its own responses. StoreFailure is
how a raw object store error is described in the logs.
"""

from dataclasses import dataclass
from enum import Enum


class HttpError(Exception):
    """Base class for failures that map onto an HTTP status."""

    status_code: int = 500
    error_code: str = "H500"

    def __init__(self, message: str = ""):
        super().__init__(message or self.__class__.__name__)
        self.message = message


class NotFoundHttpError(HttpError):
    status_code = 404
    error_code = "H404"


class UnsupportedMediaTypeHttpError(HttpError):
    status_code = 415
    error_code = "H415"


class ErrorSeverity(str, Enum):
    """How serious a store error is and who can fix it."""

    INFO = "info"          # Expected or transient: absent keys, throttling
    CONFIG = "config"      # Credentials or bucket name are wrong
    CRITICAL = "critical"  # Unknown or infrastructure-level failure


@dataclass
class StoreFailure:
    """A classified object store error."""

    message: str                          # Short description for the logs
    severity: ErrorSeverity               # info / config / critical
    error_code: str = ""                  # Machine-readable code (e.g. S3_NO_SUCH_KEY)
    retryable: bool = False               # Would the same call likely succeed later?
    original_error: str = ""              # Raw error text
