# src/shiprate/adapters/carriers/ups/carrier.py
"""
UPS Carrier - Carrier Facade for UPS

Binds one UPSAuthClient and one UPSRatingService behind the carrier-agnostic
Carrier interface, so callers never depend on UPS-specific types.

Files that USE this module:
- shiprate.application.rates_service (create_carrier builds UPSCarrier)
- tests.test_ups_carrier (unit tests)

Files that this module USES:
- shiprate.adapters.carriers.base (Carrier interface)
- shiprate.adapters.carriers.ups.auth (UPSAuthClient)
- shiprate.adapters.carriers.ups.rating (UPSRatingService)
- shiprate.config.settings (Settings, for from_settings)
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from shiprate.adapters.carriers.base import Carrier
from shiprate.adapters.carriers.ups.auth import UPSAuthClient
from shiprate.adapters.carriers.ups.codes import CARRIER_NAME
from shiprate.adapters.carriers.ups.rating import UPSRatingService
from shiprate.domain.models import RateRequest, RateResponse

if TYPE_CHECKING:
    from shiprate.config.settings import Settings


class UPSCarrier(Carrier):
    def __init__(self, auth_client: UPSAuthClient, rating_service: UPSRatingService):
        self.auth_client = auth_client
        self.rating_service = rating_service

    @classmethod
    def from_settings(cls, settings: Settings) -> UPSCarrier:
        """
        Wire a UPSCarrier from a loaded configuration value.

        The auth client is shared by the rating service so a 401 refresh
        updates the same token cache.
        """
        auth_client = UPSAuthClient(
            client_id=settings.ups_client_id,
            client_secret=settings.ups_client_secret,
            auth_url=settings.ups_auth_url,
            timeout=settings.request_timeout_seconds,
        )
        rating_service = UPSRatingService(
            auth_client,
            api_base_url=settings.ups_api_base_url,
            timeout=settings.request_timeout_seconds,
        )
        return cls(auth_client, rating_service)

    def get_name(self) -> str:
        return CARRIER_NAME

    def get_rates(self, request: RateRequest) -> RateResponse:
        return self.rating_service.get_rates(request)
