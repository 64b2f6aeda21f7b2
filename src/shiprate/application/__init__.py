# src/shiprate/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate carriers.
Carriers are reached only through the Carrier interface.
"""

from shiprate.application.rates_service import (
    CarrierType,
    create_carrier,
    get_rates_from_multiple_carriers,
)

__all__ = [
    "CarrierType",
    "create_carrier",
    "get_rates_from_multiple_carriers",
]
