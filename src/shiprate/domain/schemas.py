# src/shiprate/domain/schemas.py
"""
Validation Schemas - Structural Rules for Domain Objects

Pydantic schemas mirroring the domain models. They are applied to a
RateRequest before any network call is attempted, and to every Rate the
response parser produces.

Files that USE this module:
- shiprate.adapters.carriers.ups.rating (validates requests and parsed rates)
- tests.test_schemas (unit tests)

Files that this module USES:
- shiprate.domain.models (enums shared with the dataclasses)
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from shiprate.domain.models import DimensionUnit, ServiceLevel, WeightUnit

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]
CountryCode = Annotated[str, StringConstraints(pattern=r"^[A-Za-z]{2}$", to_upper=True)]
CurrencyCode = Annotated[str, StringConstraints(min_length=3, max_length=3)]
# strict: booleans and numeric strings are not measures
PositiveFloat = Annotated[float, Field(gt=0, allow_inf_nan=False, strict=True)]


class _Schema(BaseModel):
    # Domain objects are dataclasses, so read them by attribute.
    model_config = ConfigDict(from_attributes=True, frozen=True)


class AddressSchema(_Schema):
    street_lines: List[NonEmptyStr] = Field(min_length=1, max_length=3)
    city: NonEmptyStr
    state_or_province: NonEmptyStr
    postal_code: NonEmptyStr
    country_code: CountryCode
    residential: Optional[bool] = None


class PackageSchema(_Schema):
    length: PositiveFloat
    width: PositiveFloat
    height: PositiveFloat
    dimension_unit: DimensionUnit
    weight: PositiveFloat
    weight_unit: WeightUnit


class RateRequestSchema(_Schema):
    origin: AddressSchema
    destination: AddressSchema
    packages: List[PackageSchema] = Field(min_length=1)
    service_level: Optional[ServiceLevel] = None
    ship_date: Optional[date] = None


class RateSchema(_Schema):
    carrier: NonEmptyStr
    service: str
    service_level: ServiceLevel
    total_charges: float = Field(ge=0, allow_inf_nan=False)
    currency: CurrencyCode
    estimated_delivery_date: Optional[date] = None
    transit_days: Optional[int] = Field(default=None, ge=0)
    delivery_guarantee: Optional[bool] = None


def validate_rate_request(data: Any) -> RateRequestSchema:
    """
    Validate a RateRequest (or an equivalent mapping).

    Returns:
        The validated schema, with country codes upper-cased

    Raises:
        pydantic.ValidationError: If any rule is violated
    """
    return RateRequestSchema.model_validate(data)


def validate_rate(data: Any) -> RateSchema:
    """Validate a parsed Rate; raises pydantic.ValidationError."""
    return RateSchema.model_validate(data)
