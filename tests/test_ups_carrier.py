"""
UPS Carrier Tests - Facade Wiring and Delegation

Files that this module USES:
- shiprate.adapters.carriers.ups (UPSCarrier, UPSAuthClient, UPSRatingService)
- shiprate.config.settings (Settings for from_settings)
- unittest.mock (test doubles)
"""
from unittest.mock import Mock

from shiprate.adapters.carriers.base import Carrier
from shiprate.adapters.carriers.ups import UPSAuthClient, UPSCarrier, UPSRatingService
from shiprate.config.settings import Settings
from shiprate.domain.models import RateResponse


def _settings(**overrides):
    fields = dict(
        ups_client_id="client-id",
        ups_client_secret="client-secret",
        ups_api_base_url="https://ups.test/api/",
        ups_auth_url="https://ups.test/security/v1/oauth/token",
        request_timeout_seconds=12,
    )
    fields.update(overrides)
    return Settings(_env_file=None, **fields)


class TestUPSCarrier:
    def test_name(self):
        carrier = UPSCarrier(Mock(spec=UPSAuthClient), Mock(spec=UPSRatingService))
        assert isinstance(carrier, Carrier)
        assert carrier.get_name() == "UPS"

    def test_get_rates_delegates_to_rating_service(self, domestic_request):
        rating_service = Mock(spec=UPSRatingService)
        expected = RateResponse(request_id="Rate-1")
        rating_service.get_rates.return_value = expected
        carrier = UPSCarrier(Mock(spec=UPSAuthClient), rating_service)

        assert carrier.get_rates(domestic_request) is expected
        rating_service.get_rates.assert_called_once_with(domestic_request)

    def test_from_settings_shares_auth_client(self):
        carrier = UPSCarrier.from_settings(_settings())

        assert isinstance(carrier.auth_client, UPSAuthClient)
        assert carrier.rating_service.auth_client is carrier.auth_client

    def test_from_settings_passes_endpoints_and_timeout(self):
        carrier = UPSCarrier.from_settings(_settings())

        assert carrier.rating_service.rating_url == "https://ups.test/api/rating/v1/rate"
        assert carrier.rating_service.timeout == 12
        assert carrier.auth_client.auth_url == "https://ups.test/security/v1/oauth/token"
        assert carrier.auth_client.timeout == 12
