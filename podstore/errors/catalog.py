"""
Store error catalog.

Maps regex patterns from known S3/MinIO and metadata errors to a
classification. When a new error shows up in the logs as UNMATCHED:
  1. Capture the raw error text
  2. Add a regex pattern here
  3. Add a unit test
"""

import re
from podstore.errors.models import StoreFailure, ErrorSeverity

# Each entry: (compiled_regex, StoreFailure template)
# Order matters: first match wins.

ERROR_PATTERNS: list[tuple[re.Pattern, StoreFailure]] = [
    # ── Absent objects ─────────────────────────────────────────────────────

    (
        re.compile(r"NoSuchKey|The specified key does not exist", re.IGNORECASE),
        StoreFailure(
            message="Object does not exist",
            severity=ErrorSeverity.INFO,
            error_code="S3_NO_SUCH_KEY",
        ),
    ),
    (
        re.compile(r"NoSuchBucket|The specified bucket does not exist", re.IGNORECASE),
        StoreFailure(
            message="Bucket does not exist; check the configured bucket name",
            severity=ErrorSeverity.CONFIG,
            error_code="S3_NO_SUCH_BUCKET",
        ),
    ),

    # ── Credentials / permissions ─────────────────────────────────────────

    (
        re.compile(r"InvalidAccessKeyId", re.IGNORECASE),
        StoreFailure(
            message="Access key is not known to the store",
            severity=ErrorSeverity.CONFIG,
            error_code="S3_INVALID_ACCESS_KEY",
        ),
    ),
    (
        re.compile(r"SignatureDoesNotMatch", re.IGNORECASE),
        StoreFailure(
            message="Secret key does not match the access key",
            severity=ErrorSeverity.CONFIG,
            error_code="S3_BAD_SIGNATURE",
        ),
    ),
    (
        re.compile(r"AccessDenied|Forbidden", re.IGNORECASE),
        StoreFailure(
            message="Credentials lack permission for this bucket or key",
            severity=ErrorSeverity.CONFIG,
            error_code="S3_ACCESS_DENIED",
        ),
    ),

    # ── Transient ─────────────────────────────────────────────────────────

    (
        re.compile(r"SlowDown|ThrottlingException|Please reduce your request rate", re.IGNORECASE),
        StoreFailure(
            message="Store is throttling requests",
            severity=ErrorSeverity.INFO,
            error_code="S3_THROTTLED",
            retryable=True,
        ),
    ),
    (
        re.compile(r"Could not connect to the endpoint|EndpointConnectionError|Connection refused", re.IGNORECASE),
        StoreFailure(
            message="Store endpoint is unreachable",
            severity=ErrorSeverity.CRITICAL,
            error_code="S3_UNREACHABLE",
            retryable=True,
        ),
    ),
    (
        re.compile(r"timed out|ReadTimeout|ConnectTimeout", re.IGNORECASE),
        StoreFailure(
            message="Store request timed out",
            severity=ErrorSeverity.INFO,
            error_code="S3_TIMEOUT",
            retryable=True,
        ),
    ),

    # ── Metadata ──────────────────────────────────────────────────────────

    (
        re.compile(r"BadSyntax|at line \d+ of <>", re.IGNORECASE),
        StoreFailure(
            message="Stored metadata is not valid Turtle",
            severity=ErrorSeverity.CRITICAL,
            error_code="META_BAD_TURTLE",
        ),
    ),
]


GENERIC_FAILURE = StoreFailure(
    message="Unclassified store error",
    severity=ErrorSeverity.CRITICAL,
    error_code="UNKNOWN",
)
