from podstore.errors.models import (
    HttpError, NotFoundHttpError, UnsupportedMediaTypeHttpError,
    StoreFailure, ErrorSeverity,
)
from podstore.errors.handler import StoreErrorHandler

__all__ = [
    "HttpError", "NotFoundHttpError", "UnsupportedMediaTypeHttpError",
    "StoreFailure", "ErrorSeverity", "StoreErrorHandler",
]
