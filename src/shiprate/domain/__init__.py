# src/shiprate/domain/__init__.py
"""
Domain Layer - Carrier-Agnostic Business Objects

This package contains the shipping domain models, their validation rules
and the carrier error taxonomy. No dependencies on HTTP or configuration.
"""

from shiprate.domain.models import (
    Address,
    AuthToken,
    DimensionUnit,
    Package,
    Rate,
    RateRequest,
    RateResponse,
    ServiceLevel,
    WeightUnit,
)
from shiprate.domain.errors import (
    CarrierError,
    DomainError,
    ErrorKind,
)
from shiprate.domain.schemas import validate_rate, validate_rate_request

__all__ = [
    "Address",
    "Package",
    "DimensionUnit",
    "WeightUnit",
    "ServiceLevel",
    "RateRequest",
    "Rate",
    "RateResponse",
    "AuthToken",
    "DomainError",
    "CarrierError",
    "ErrorKind",
    "validate_rate_request",
    "validate_rate",
]
