"""
Shared Test Fixtures

Sample rate requests, UPS payloads and a factory for real
requests.Response objects, so raise_for_status() and json() behave exactly
as they do against the live API.
"""
import json
from typing import Any, Dict, Optional

import pytest
import requests

from shiprate.domain.models import (
    Address,
    DimensionUnit,
    Package,
    RateRequest,
    ServiceLevel,
    WeightUnit,
)


def build_response(
    status_code: int = 200,
    json_body: Any = None,
    text: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    url: str = "https://ups.test/api/rating/v1/rate",
) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = "OK" if status_code < 400 else "Error"
    resp.url = url
    resp.encoding = "utf-8"
    if json_body is not None:
        resp._content = json.dumps(json_body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    else:
        resp._content = (text or "").encode("utf-8")
    resp.headers.update(headers or {})
    return resp


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def origin() -> Address:
    return Address(
        street_lines=("123 Main St",),
        city="San Francisco",
        state_or_province="CA",
        postal_code="94105",
        country_code="US",
    )


@pytest.fixture
def destination() -> Address:
    return Address(
        street_lines=("456 Market St",),
        city="New York",
        state_or_province="NY",
        postal_code="10001",
        country_code="US",
    )


@pytest.fixture
def small_package() -> Package:
    return Package(
        length=12,
        width=8,
        height=6,
        dimension_unit=DimensionUnit.IN,
        weight=5,
        weight_unit=WeightUnit.LBS,
    )


@pytest.fixture
def domestic_request(origin, destination, small_package) -> RateRequest:
    return RateRequest(origin=origin, destination=destination, packages=(small_package,))


@pytest.fixture
def next_day_request(origin, destination, small_package) -> RateRequest:
    return RateRequest(
        origin=origin,
        destination=destination,
        packages=(small_package,),
        service_level=ServiceLevel.NEXT_DAY,
    )


@pytest.fixture
def multi_package_request(origin, destination, small_package) -> RateRequest:
    cube = Package(
        length=10,
        width=10,
        height=10,
        dimension_unit=DimensionUnit.IN,
        weight=10,
        weight_unit=WeightUnit.LBS,
    )
    return RateRequest(origin=origin, destination=destination, packages=(small_package, cube))


@pytest.fixture
def token_payload() -> Dict[str, Any]:
    return {
        "access_token": "mock_access_token_12345",
        "token_type": "Bearer",
        "expires_in": 3600,
        "scope": "rating",
    }


@pytest.fixture
def single_rate_payload() -> Dict[str, Any]:
    return {
        "RateResponse": {
            "Response": {
                "ResponseStatus": {"Code": "1", "Description": "Success"},
                "TransactionReference": {"CustomerContext": "Rate-1234567890"},
            },
            "RatedShipment": {
                "Service": {"Code": "03", "Description": "UPS Ground"},
                "TotalCharges": {"CurrencyCode": "USD", "MonetaryValue": "45.67"},
                "GuaranteedDelivery": {"BusinessDaysInTransit": "3"},
                "TimeInTransit": {
                    "PickupDate": "2024-02-06",
                    "ServiceSummary": {
                        "Service": {"Description": "UPS Ground"},
                        "EstimatedArrival": {
                            "Arrival": {"Date": "2024-02-09", "Time": "170000"},
                            "BusinessDaysInTransit": "3",
                        },
                    },
                },
            },
        }
    }


@pytest.fixture
def multiple_rates_payload() -> Dict[str, Any]:
    return {
        "RateResponse": {
            "Response": {
                "ResponseStatus": {"Code": "1", "Description": "Success"},
                "TransactionReference": {"CustomerContext": "Rate-1234567890"},
            },
            "RatedShipment": [
                {
                    "Service": {"Code": "03", "Description": "UPS Ground"},
                    "TotalCharges": {"CurrencyCode": "USD", "MonetaryValue": "45.67"},
                    "GuaranteedDelivery": {"BusinessDaysInTransit": "3"},
                },
                {
                    "Service": {"Code": "02", "Description": "UPS 2nd Day Air"},
                    "TotalCharges": {"CurrencyCode": "USD", "MonetaryValue": "78.90"},
                    "GuaranteedDelivery": {"BusinessDaysInTransit": "2"},
                },
                {
                    "Service": {"Code": "01", "Description": "UPS Next Day Air"},
                    "TotalCharges": {"CurrencyCode": "USD", "MonetaryValue": "125.50"},
                    "GuaranteedDelivery": {"BusinessDaysInTransit": "1"},
                },
            ],
        }
    }


@pytest.fixture
def invalid_address_payload() -> Dict[str, Any]:
    return {
        "response": {
            "errors": [
                {
                    "code": "9110208",
                    "message": "The postal code is invalid for the specified city and state/province",
                }
            ]
        }
    }
