# src/shiprate/adapters/carriers/base.py
"""
Base Carrier Interfaces

This module defines the capability contracts every carrier integration
implements: an AuthClient owning the carrier's token cache, and a Carrier
exposing carrier-agnostic rating. Callers depend only on these types.

Files that USE this module:
- shiprate.adapters.carriers.ups.auth (UPSAuthClient implements AuthClient)
- shiprate.adapters.carriers.ups.carrier (UPSCarrier implements Carrier)
- shiprate.application.rates_service (factory returns Carrier)

Files that this module USES:
- shiprate.domain.models (RateRequest, RateResponse)
"""
from abc import ABC, abstractmethod

from shiprate.domain.models import RateRequest, RateResponse


class AuthClient(ABC):
    @abstractmethod
    def get_access_token(self) -> str:
        """
        Return a currently valid access token.

        Uses the cached token when still valid, otherwise performs a
        credential exchange and caches the result.

        Raises:
            CarrierError: AUTHENTICATION or NETWORK kind if acquisition fails
        """
        raise NotImplementedError

    @abstractmethod
    def refresh_token(self) -> None:
        """Discard the cached token and perform a new credential exchange."""
        raise NotImplementedError

    @abstractmethod
    def clear_token(self) -> None:
        """Discard the cached token. Never fails."""
        raise NotImplementedError


class Carrier(ABC):
    @abstractmethod
    def get_name(self) -> str:
        """Return the carrier name (e.g. 'UPS')."""
        raise NotImplementedError

    @abstractmethod
    def get_rates(self, request: RateRequest) -> RateResponse:
        """
        Return normalized rate quotes for `request`.

        Raises:
            CarrierError: On any validation, transport or carrier failure
        """
        raise NotImplementedError
