# src/shiprate/domain/models.py
"""
Domain Models - Carrier-Agnostic Shipping Objects

This module contains the domain models shared by every carrier integration:
- Addresses and packages describing a shipment
- Normalized service levels
- Rate requests and rate quotes
- OAuth access tokens

Files that USE this module:
- shiprate.domain.schemas (validation rules over these models)
- shiprate.adapters.carriers.* (carriers translate to and from these models)
- shiprate.application.rates_service (multi-carrier aggregation)
- tests.* (tests build requests from these models)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass, field  # Decorators for creating immutable data classes
from datetime import date, datetime  # Ship/delivery dates and token expiry timestamps
from enum import Enum  # Closed enumerations for units and service levels
from typing import Optional, Sequence, Tuple  # Type hints for optional values and sequences


class DimensionUnit(str, Enum):
    """Length unit for package dimensions."""
    IN = "IN"
    CM = "CM"


class WeightUnit(str, Enum):
    """Weight unit for packages."""
    LBS = "LBS"
    KGS = "KGS"


class ServiceLevel(str, Enum):
    """
    Carrier-agnostic shipping speed.

    Several carrier service codes may normalize to the same level.
    """
    GROUND = "GROUND"
    TWO_DAY = "TWO_DAY"
    NEXT_DAY = "NEXT_DAY"
    NEXT_DAY_EARLY_AM = "NEXT_DAY_EARLY_AM"
    THREE_DAY = "THREE_DAY"
    INTERNATIONAL_STANDARD = "INTERNATIONAL_STANDARD"
    INTERNATIONAL_EXPEDITED = "INTERNATIONAL_EXPEDITED"


@dataclass(frozen=True)
class Address:
    """
    Shipping origin or destination.

    Attributes:
        street_lines: One to three street lines
        city: City name
        state_or_province: State or province code
        postal_code: Postal/ZIP code
        country_code: ISO 3166-1 alpha-2 code, stored upper-case
        residential: Whether the address is residential
    """
    street_lines: Tuple[str, ...]
    city: str
    state_or_province: str
    postal_code: str
    country_code: str
    residential: Optional[bool] = None

    def __post_init__(self) -> None:
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "street_lines", tuple(self.street_lines))
        if isinstance(self.country_code, str):
            object.__setattr__(self, "country_code", self.country_code.upper())


@dataclass(frozen=True)
class Package:
    """
    Package dimensions and weight.

    Attributes:
        length: Length in dimension_unit
        width: Width in dimension_unit
        height: Height in dimension_unit
        dimension_unit: IN or CM
        weight: Weight in weight_unit
        weight_unit: LBS or KGS
    """
    length: float
    width: float
    height: float
    dimension_unit: DimensionUnit
    weight: float
    weight_unit: WeightUnit


@dataclass(frozen=True)
class RateRequest:
    """
    Request for shipping rates.

    Attributes:
        origin: Ship-from address
        destination: Ship-to address
        packages: One or more packages
        service_level: Restrict quotes to this level (None returns all services)
        ship_date: Planned ship date (None means today)
    """
    origin: Address
    destination: Address
    packages: Tuple[Package, ...]
    service_level: Optional[ServiceLevel] = None
    ship_date: Optional[date] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "packages", tuple(self.packages))

    @property
    def effective_ship_date(self) -> date:
        """Ship date, defaulting to today."""
        return self.ship_date or date.today()


@dataclass(frozen=True)
class Rate:
    """A single rate quote from a carrier."""
    carrier: str
    service: str
    service_level: ServiceLevel
    total_charges: float
    currency: str
    estimated_delivery_date: Optional[date] = None
    transit_days: Optional[int] = None
    delivery_guarantee: Optional[bool] = None


@dataclass(frozen=True)
class RateResponse:
    """
    Rate quotes in carrier response order.

    Attributes:
        rates: Quotes, never re-sorted
        request_id: Opaque correlation id echoed by the carrier
    """
    rates: Sequence[Rate] = field(default_factory=tuple)
    request_id: Optional[str] = None


@dataclass(frozen=True)
class AuthToken:
    """OAuth access token; replaced wholesale on refresh."""
    access_token: str
    token_type: str
    expires_at: datetime
