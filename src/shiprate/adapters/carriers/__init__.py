# src/shiprate/adapters/carriers/__init__.py
"""
Carrier Adapters - External Carrier API Clients

This package contains adapters for shipping carrier APIs.
All carriers implement the Carrier interface; their token caches implement
AuthClient.
"""

from shiprate.adapters.carriers.base import AuthClient, Carrier
from shiprate.adapters.carriers.ups import UPSAuthClient, UPSCarrier, UPSRatingService

__all__ = [
    "AuthClient",
    "Carrier",
    "UPSAuthClient",
    "UPSCarrier",
    "UPSRatingService",
]
