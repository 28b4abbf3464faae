# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Unified exception classes for typed_algolia.

Every error carries a message, a machine-readable code and a details dict,
so callers (and the CLI) can report failures uniformly.
"""

from typing import Optional


class AlgoliaError(Exception):
    """Base exception for all typed_algolia errors."""

    def __init__(self, message: str, code: str = "UNKNOWN", details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


# ============= Codec Errors =============


class DecodeError(AlgoliaError, ValueError):
    """A wire value does not match any accepted shape of its field."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="DECODE_ERROR", details=details)
        self.field = field

    def for_field(self, field: str) -> "DecodeError":
        """Return a copy of this error annotated with the wire field name."""
        return DecodeError(f"{field}: {self.message}", field=field)


# ============= Argument Errors =============


class InvalidObjectError(AlgoliaError, ValueError):
    """An object cannot be sent as given. Raised before any request is made."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_OBJECT")


# ============= Configuration Errors =============


class ConfigurationError(AlgoliaError):
    """Required credentials or settings are missing."""

    def __init__(self, message: str, missing: Optional[list] = None):
        details = {"missing": missing} if missing else {}
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


# ============= Transport Errors =============


class TransportError(AlgoliaError):
    """The HTTP exchange with the search service failed."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: str = "TRANSPORT_ERROR",
    ):
        details = {"status_code": status_code} if status_code is not None else {}
        super().__init__(message, code=code, details=details)
        self.status_code = status_code


class InvalidArgumentError(TransportError):
    """The service rejected the request as malformed."""

    def __init__(self, message: str = "Invalid argument", status_code: Optional[int] = 400):
        super().__init__(message, status_code=status_code, code="INVALID_ARGUMENT")


class UnauthenticatedError(TransportError):
    """The application id / API key pair was not accepted."""

    def __init__(self, message: str = "Authentication required", status_code: int = 401):
        super().__init__(message, status_code=status_code, code="UNAUTHENTICATED")


class PermissionDeniedError(TransportError):
    """The API key lacks the ACL for the requested operation."""

    def __init__(self, message: str = "Permission denied", status_code: int = 403):
        super().__init__(message, status_code=status_code, code="PERMISSION_DENIED")


class NotFoundError(TransportError):
    """Index or object not found."""

    def __init__(self, message: str = "Not found", status_code: int = 404):
        super().__init__(message, status_code=status_code, code="NOT_FOUND")


class RateLimitedError(TransportError):
    """The service refused the request because of rate limiting."""

    def __init__(self, message: str = "Too many requests", status_code: int = 429):
        super().__init__(message, status_code=status_code, code="RATE_LIMITED")


class UnavailableError(TransportError):
    """Service temporarily unavailable."""

    def __init__(self, message: str = "Service unavailable", status_code: int = 503):
        super().__init__(message, status_code=status_code, code="UNAVAILABLE")
