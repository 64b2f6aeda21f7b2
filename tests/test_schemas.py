"""
Domain Tests - Models and Validation Rules

Files that this module USES:
- shiprate.domain.models (dataclasses under test)
- shiprate.domain.schemas (validation rules under test)
- pytest (testing framework)
"""
from dataclasses import replace
from datetime import date

import pytest
from pydantic import ValidationError

from shiprate.domain.models import Address, Rate, RateRequest, RateResponse, ServiceLevel
from shiprate.domain.schemas import validate_rate, validate_rate_request


class TestModels:
    def test_address_normalizes_country_and_lines(self):
        address = Address(
            street_lines=["1 Infinite Loop"],
            city="Cupertino",
            state_or_province="CA",
            postal_code="95014",
            country_code="us",
        )
        assert address.country_code == "US"
        assert address.street_lines == ("1 Infinite Loop",)

    def test_request_defaults(self, origin, destination, small_package):
        request = RateRequest(origin=origin, destination=destination, packages=[small_package])
        assert request.packages == (small_package,)
        assert request.service_level is None
        assert request.effective_ship_date == date.today()

    def test_explicit_ship_date(self, domestic_request):
        request = replace(domestic_request, ship_date=date(2024, 2, 6))
        assert request.effective_ship_date == date(2024, 2, 6)

    def test_rate_response_defaults(self):
        response = RateResponse()
        assert list(response.rates) == []
        assert response.request_id is None


class TestValidateRateRequest:
    def test_valid_request(self, multi_package_request):
        validated = validate_rate_request(multi_package_request)
        assert len(validated.packages) == 2
        assert validated.origin.country_code == "US"

    def test_service_level_accepted(self, next_day_request):
        assert validate_rate_request(next_day_request).service_level is ServiceLevel.NEXT_DAY

    def test_requires_a_street_line(self, domestic_request, origin):
        request = replace(domestic_request, origin=replace(origin, street_lines=()))
        with pytest.raises(ValidationError):
            validate_rate_request(request)

    def test_at_most_three_street_lines(self, domestic_request, origin):
        request = replace(domestic_request, origin=replace(origin, street_lines=("a", "b", "c", "d")))
        with pytest.raises(ValidationError):
            validate_rate_request(request)

    def test_street_lines_must_be_non_empty(self, domestic_request, origin):
        request = replace(domestic_request, origin=replace(origin, street_lines=("",)))
        with pytest.raises(ValidationError):
            validate_rate_request(request)

    @pytest.mark.parametrize("field", ["city", "state_or_province", "postal_code"])
    def test_required_address_text(self, domestic_request, destination, field):
        request = replace(domestic_request, destination=replace(destination, **{field: ""}))
        with pytest.raises(ValidationError):
            validate_rate_request(request)

    @pytest.mark.parametrize("code", ["USA", "U", "1A"])
    def test_country_code_is_two_letters(self, domestic_request, destination, code):
        request = replace(domestic_request, destination=replace(destination, country_code=code))
        with pytest.raises(ValidationError):
            validate_rate_request(request)

    @pytest.mark.parametrize("field", ["length", "width", "height", "weight"])
    @pytest.mark.parametrize("value", [0, -1.5])
    def test_package_measures_must_be_positive(self, domestic_request, small_package, field, value):
        request = replace(domestic_request, packages=(replace(small_package, **{field: value}),))
        with pytest.raises(ValidationError):
            validate_rate_request(request)

    @pytest.mark.parametrize("value", [True, "12"])
    def test_package_measures_must_be_numbers(self, domestic_request, small_package, value):
        request = replace(domestic_request, packages=(replace(small_package, length=value),))
        with pytest.raises(ValidationError):
            validate_rate_request(request)

    def test_unknown_units_rejected(self, domestic_request, small_package):
        request = replace(domestic_request, packages=(replace(small_package, dimension_unit="FT"),))
        with pytest.raises(ValidationError):
            validate_rate_request(request)

    def test_requires_packages(self, domestic_request):
        with pytest.raises(ValidationError):
            validate_rate_request(replace(domestic_request, packages=()))


class TestValidateRate:
    def _rate(self, **overrides):
        fields = dict(
            carrier="UPS",
            service="UPS Ground",
            service_level=ServiceLevel.GROUND,
            total_charges=10.0,
            currency="USD",
        )
        fields.update(overrides)
        return Rate(**fields)

    def test_valid_rate(self):
        assert validate_rate(self._rate(transit_days=2, delivery_guarantee=True)).transit_days == 2

    def test_zero_charge_allowed(self):
        validate_rate(self._rate(total_charges=0.0))

    def test_negative_charge_rejected(self):
        with pytest.raises(ValidationError):
            validate_rate(self._rate(total_charges=-0.01))

    def test_currency_must_have_three_letters(self):
        with pytest.raises(ValidationError):
            validate_rate(self._rate(currency="US"))

    def test_negative_transit_days_rejected(self):
        with pytest.raises(ValidationError):
            validate_rate(self._rate(transit_days=-1))
