"""
StoreErrorHandler — classifies raw object store exceptions for the logs.

Usage:
    from podstore.errors.handler import StoreErrorHandler

    error_handler = StoreErrorHandler()

    try:
        stream = await client.get_object(bucket, key)
    except Exception as e:
        failure = error_handler.handle(e, context="get_data")
        raise NotFoundHttpError() from e
"""

import logging
from dataclasses import replace

from podstore.errors.models import StoreFailure, ErrorSeverity
from podstore.errors.catalog import ERROR_PATTERNS, GENERIC_FAILURE

logger = logging.getLogger("podstore.errors")


class StoreErrorHandler:
    """Matches exceptions against the error catalog."""

    def handle(self, error: BaseException, context: str = "") -> StoreFailure:
        """Classify an exception.

        Args:
            error: The caught exception.
            context: Optional context string (e.g. "get_data /docs/a.txt").

        Returns:
            A StoreFailure describing the error.
        """
        return self.handle_string(f"{error.__class__.__name__}: {error}", context)

    def handle_string(self, error_message: str, context: str = "") -> StoreFailure:
        """Classify a raw error string (not an exception)."""
        for pattern, template in ERROR_PATTERNS:
            if pattern.search(error_message):
                failure = replace(template, original_error=error_message)
                self._log_failure(failure, context)
                return failure

        failure = replace(GENERIC_FAILURE, original_error=error_message)
        self._log_failure(failure, context, matched=False)
        return failure

    def _log_failure(
        self, failure: StoreFailure, context: str, matched: bool = True
    ) -> None:
        prefix = f"[{context}] " if context else ""
        match_tag = failure.error_code if matched else "UNMATCHED"

        if failure.severity == ErrorSeverity.CRITICAL:
            logger.error(
                f"{prefix}{match_tag}: {failure.original_error}"
            )
        elif failure.severity == ErrorSeverity.CONFIG:
            logger.warning(
                f"{prefix}{match_tag}: {failure.original_error}"
            )
        else:
            logger.info(
                f"{prefix}{match_tag}: {failure.original_error}"
            )
