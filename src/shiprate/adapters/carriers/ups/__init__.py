# src/shiprate/adapters/carriers/ups/__init__.py
"""
UPS Carrier Adapter

OAuth client-credentials authentication and Rating API integration for UPS.
"""

from shiprate.adapters.carriers.ups.auth import UPSAuthClient
from shiprate.adapters.carriers.ups.carrier import UPSCarrier
from shiprate.adapters.carriers.ups.codes import UPS_SERVICE_CODES
from shiprate.adapters.carriers.ups.rating import UPSRatingService

__all__ = [
    "UPSAuthClient",
    "UPSCarrier",
    "UPSRatingService",
    "UPS_SERVICE_CODES",
]
