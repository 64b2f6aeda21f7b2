# src/shiprate/application/rates_service.py
"""
Rates Service - Carrier Selection and Multi-Carrier Rate Shopping

This module contains the orchestration above individual carriers:
- a factory that builds a Carrier from a CarrierType and loaded settings
- a convenience that queries several carriers and merges their quotes

Failures of a single carrier are logged and treated as "no rates" here;
this is the only place in the package where a CarrierError is downgraded.

Files that USE this module:
- shiprate.app (creates the carrier for the demo CLI)
- tests.test_rates_service (unit tests)

Files that this module USES:
- shiprate.adapters.carriers (Carrier interface, UPSCarrier)
- shiprate.config.settings (Settings passed to carriers)
- shiprate.domain.models (RateRequest, RateResponse)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages and errors
from enum import Enum  # Closed enumeration of supported carriers
from typing import Iterable, List  # Type hints for carrier lists

from shiprate.adapters.carriers.base import Carrier  # Carrier-agnostic interface
from shiprate.adapters.carriers.ups import UPSCarrier  # UPS implementation
from shiprate.config.settings import Settings  # Loaded configuration value
from shiprate.domain.models import Rate, RateRequest, RateResponse  # Domain models

log = logging.getLogger(__name__)


class CarrierType(str, Enum):
    """Supported carriers."""
    UPS = "UPS"


def create_carrier(carrier_type: CarrierType, settings: Settings) -> Carrier:
    """
    Build a carrier instance.

    Args:
        carrier_type: Carrier to build
        settings: Configuration value loaded at process start

    Returns:
        A Carrier ready to rate shipments

    Raises:
        ValueError: If the carrier type is not supported
    """
    if carrier_type == CarrierType.UPS:
        return UPSCarrier.from_settings(settings)
    raise ValueError(f"Unsupported carrier type: {carrier_type}")


def get_rates_from_multiple_carriers(
    request: RateRequest,
    carrier_types: Iterable[CarrierType],
    settings: Settings,
) -> RateResponse:
    """
    Collect rates from several carriers, in the order given.

    A carrier that fails (including one that cannot be built) contributes
    no rates; the failure is logged, not raised.

    Returns:
        RateResponse with all collected rates and no request id; may be empty
    """
    all_rates: List[Rate] = []
    for carrier_type in carrier_types:
        try:
            carrier = create_carrier(carrier_type, settings)
            response = carrier.get_rates(request)
        except Exception as e:
            log.warning("Failed to get rates from %s: %s", getattr(carrier_type, "value", carrier_type), e)
            continue
        log.info("Got %d rate(s) from %s", len(response.rates), carrier.get_name())
        all_rates.extend(response.rates)

    return RateResponse(rates=tuple(all_rates))
