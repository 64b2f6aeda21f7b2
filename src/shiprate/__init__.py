# src/shiprate/__init__.py
"""
ShipRate - Carrier-Agnostic Shipping Rate Integration

Normalizes shipping-rate queries across carriers into one domain model and
implements it for UPS: OAuth client-credentials token caching, Rating API
request building and response parsing, and a uniform error taxonomy.
"""

from shiprate.adapters.carriers import AuthClient, Carrier, UPSAuthClient, UPSCarrier, UPSRatingService
from shiprate.application import CarrierType, create_carrier, get_rates_from_multiple_carriers
from shiprate.domain import (
    Address,
    AuthToken,
    CarrierError,
    DimensionUnit,
    ErrorKind,
    Package,
    Rate,
    RateRequest,
    RateResponse,
    ServiceLevel,
    WeightUnit,
    validate_rate_request,
)

__version__ = "1.0.0"

__all__ = [
    "Address",
    "AuthClient",
    "AuthToken",
    "Carrier",
    "CarrierError",
    "CarrierType",
    "DimensionUnit",
    "ErrorKind",
    "Package",
    "Rate",
    "RateRequest",
    "RateResponse",
    "ServiceLevel",
    "UPSAuthClient",
    "UPSCarrier",
    "UPSRatingService",
    "WeightUnit",
    "create_carrier",
    "get_rates_from_multiple_carriers",
    "validate_rate_request",
]
