# src/shiprate/app.py
"""
Application Entry Point - Demonstration CLI

This module is the composition root for the command line demo. It loads
settings once, configures logging, builds a carrier through the factory and
rates a sample Atlanta -> New York shipment.

Files that USE this module:
- shiprate.__main__ (python -m shiprate)
- the `shiprate` console script

Files that this module USES:
- shiprate.config (load_settings for configuration)
- shiprate.shared.logging_conf (setup_logging for logging configuration)
- shiprate.application.rates_service (create_carrier, CarrierType)
- shiprate.domain (request models, CarrierError)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import argparse  # Command line argument parsing
import json  # Pretty printing of error details
import logging  # Standard library for logging messages and errors
import sys  # Exit codes and output streams
from typing import Optional, Sequence  # Type hints

from pydantic import ValidationError  # Raised when settings are missing or invalid

from shiprate.application.rates_service import CarrierType, create_carrier
from shiprate.config import load_settings
from shiprate.domain.errors import CarrierError
from shiprate.domain.models import (
    Address,
    DimensionUnit,
    Package,
    RateRequest,
    RateResponse,
    ServiceLevel,
    WeightUnit,
)
from shiprate.shared.logging_conf import setup_logging

logger = logging.getLogger(__name__)


def build_sample_request(service_level: Optional[ServiceLevel] = None) -> RateRequest:
    """Sample shipment used by the demo: Atlanta, GA -> New York, NY."""
    return RateRequest(
        origin=Address(
            street_lines=("123 Shipper Lane",),
            city="Atlanta",
            state_or_province="GA",
            postal_code="30301",
            country_code="US",
        ),
        destination=Address(
            street_lines=("456 Receiver Blvd",),
            city="New York",
            state_or_province="NY",
            postal_code="10001",
            country_code="US",
        ),
        packages=(
            Package(
                length=12,
                width=10,
                height=8,
                dimension_unit=DimensionUnit.IN,
                weight=15.5,
                weight_unit=WeightUnit.LBS,
            ),
        ),
        service_level=service_level,
    )


def format_rates(response: RateResponse) -> str:
    lines = [f"Found {len(response.rates)} rate(s):"]
    for index, rate in enumerate(response.rates, start=1):
        lines.append(f"{index}. {rate.service} ({rate.service_level.value})")
        lines.append(f"   Price: {rate.total_charges:.2f} {rate.currency}")
        if rate.transit_days is not None:
            lines.append(f"   Transit: {rate.transit_days} days")
        if rate.estimated_delivery_date is not None:
            lines.append(f"   Estimated delivery: {rate.estimated_delivery_date.isoformat()}")
        lines.append("-------------------")
    return "\n".join(lines)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="shiprate",
        description="Fetch UPS rates for a sample Atlanta -> New York shipment.",
    )
    parser.add_argument(
        "--service-level",
        choices=[level.value for level in ServiceLevel],
        default=None,
        help="Restrict quotes to one service level (default: all services)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the demo.

    Returns:
        0 on success, 1 on a carrier error, 2 on invalid configuration
    """
    args = _parse_args(argv)

    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 2

    setup_logging(
        level=args.log_level or settings.log_level,
        log_file=settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

    carrier = create_carrier(CarrierType.UPS, settings)
    service_level = ServiceLevel(args.service_level) if args.service_level else None
    request = build_sample_request(service_level)

    logger.info("Fetching %s rates: Atlanta, GA -> New York, NY", carrier.get_name())
    try:
        response = carrier.get_rates(request)
    except CarrierError as e:
        logger.error("Rate request failed: kind=%s retryable=%s", e.kind.value, e.retryable)
        print("Error occurred:", file=sys.stderr)
        print(f"  Kind: {e.kind.value}", file=sys.stderr)
        print(f"  Message: {e.message}", file=sys.stderr)
        if e.details:
            print("  Details: " + json.dumps(e.details, indent=2, default=str), file=sys.stderr)
        return 1

    print(format_rates(response))
    return 0


if __name__ == "__main__":
    sys.exit(main())
