# src/shiprate/domain/errors.py
"""
Domain Errors - Carrier Error Taxonomy

This module defines the closed set of failure kinds that every carrier
integration reports. A single exception type, CarrierError, carries the
kind plus context (status code, carrier, details, retryability), so callers
branch on `error.kind` rather than on exception subclasses.

Files that USE this module:
- shiprate.adapters.carriers.ups.* (auth and rating classify failures here)
- shiprate.application.rates_service (swallows per-carrier CarrierError)
- shiprate.app (prints error kind and details)
- tests.* (assert on error kinds)

Files that this module USES:
- None (pure domain layer)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class ErrorKind(str, Enum):
    """Closed set of carrier failure kinds."""
    AUTHENTICATION = "AUTHENTICATION"
    VALIDATION = "VALIDATION"
    RATE_LIMIT = "RATE_LIMIT"
    NETWORK = "NETWORK"
    API = "API"
    NO_RATES_FOUND = "NO_RATES_FOUND"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    UNEXPECTED = "UNEXPECTED"


_ALWAYS_RETRYABLE = frozenset({ErrorKind.RATE_LIMIT, ErrorKind.NETWORK})


def is_retryable(kind: ErrorKind, status_code: Optional[int] = None) -> bool:
    """
    Decide whether a failure of `kind` is worth retrying.

    API errors are retryable only for server errors (>= 500) and 429.
    """
    if kind in _ALWAYS_RETRYABLE:
        return True
    if kind is ErrorKind.API and status_code is not None:
        return status_code >= 500 or status_code == 429
    return False


class CarrierError(DomainError):
    """
    Failure raised by a carrier integration.

    Attributes:
        kind: ErrorKind discriminating the failure
        message: Human readable message
        status_code: HTTP status when the failure came from an HTTP response
        carrier: Carrier name (e.g. "UPS")
        details: Structured context (carrier error payload, validation diagnostics)
        cause: Underlying exception, also chained as __cause__ by raisers
        retryable: Whether retrying the same call may succeed
        retry_after: Seconds to wait before retrying (rate limits only)
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        *,
        status_code: Optional[int] = None,
        carrier: Optional[str] = None,
        details: Any = None,
        cause: Optional[BaseException] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.carrier = carrier
        self.details = details
        self.cause = cause
        self.retry_after = retry_after
        self.retryable = is_retryable(kind, status_code)

    def __repr__(self) -> str:
        return (
            f"CarrierError(kind={self.kind.value}, message={self.message!r}, "
            f"status_code={self.status_code}, carrier={self.carrier!r})"
        )

    @classmethod
    def authentication(cls, message: str, **kwargs) -> "CarrierError":
        return cls(message, ErrorKind.AUTHENTICATION, **kwargs)

    @classmethod
    def validation(cls, message: str, **kwargs) -> "CarrierError":
        return cls(message, ErrorKind.VALIDATION, **kwargs)

    @classmethod
    def rate_limit(cls, message: str, retry_after: Optional[int] = None, **kwargs) -> "CarrierError":
        return cls(message, ErrorKind.RATE_LIMIT, status_code=429, retry_after=retry_after, **kwargs)

    @classmethod
    def network(cls, message: str, **kwargs) -> "CarrierError":
        return cls(message, ErrorKind.NETWORK, **kwargs)

    @classmethod
    def api(cls, message: str, status_code: int, **kwargs) -> "CarrierError":
        return cls(message, ErrorKind.API, status_code=status_code, **kwargs)

    @classmethod
    def no_rates_found(cls, message: str = "No rates available", **kwargs) -> "CarrierError":
        return cls(message, ErrorKind.NO_RATES_FOUND, **kwargs)

    @classmethod
    def invalid_response(cls, message: str, **kwargs) -> "CarrierError":
        return cls(message, ErrorKind.INVALID_RESPONSE, **kwargs)

    @classmethod
    def unexpected(cls, message: str, **kwargs) -> "CarrierError":
        return cls(message, ErrorKind.UNEXPECTED, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-friendly view of the error, for logs and CLI output.

        The cause is omitted; details are passed through as-is.
        """
        return {
            "name": type(self).__name__,
            "kind": self.kind.value,
            "message": self.message,
            "status_code": self.status_code,
            "carrier": self.carrier,
            "retryable": self.retryable,
            "retry_after": self.retry_after,
            "details": self.details,
        }
