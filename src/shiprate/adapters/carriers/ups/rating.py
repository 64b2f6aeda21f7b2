# src/shiprate/adapters/carriers/ups/rating.py
"""
UPS Rating Service - Rate Shopping Against the UPS Rating API

This module bridges the carrier-agnostic domain and the UPS Rating API:
- validates the RateRequest before any network call
- builds the UPS wire request
- calls the rating endpoint with a bearer token, refreshing the token and
  retrying exactly once on HTTP 401
- classifies every failure into a CarrierError kind
- parses rated shipments back into domain Rate objects

Files that USE this module:
- shiprate.adapters.carriers.ups.carrier (UPSCarrier delegates to it)
- tests.test_ups_rating (unit tests)

Files that this module USES:
- shiprate.adapters.carriers.base (AuthClient interface)
- shiprate.adapters.carriers.http (error payload / Retry-After parsing)
- shiprate.adapters.carriers.ups.codes (service codes and unit labels)
- shiprate.domain (models, schemas, CarrierError)
"""
import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Union

import requests
from pydantic import ValidationError

from shiprate.adapters.carriers.base import AuthClient
from shiprate.adapters.carriers.http import RAW_BODY_LIMIT, error_payload, parse_retry_after
from shiprate.adapters.carriers.ups.codes import (
    CARRIER_NAME,
    DEFAULT_PACKAGING_CODE,
    DEFAULT_PACKAGING_DESCRIPTION,
    DIMENSION_UNIT_LABELS,
    WEIGHT_UNIT_LABELS,
    service_code_for,
    service_level_for,
)
from shiprate.domain.errors import CarrierError
from shiprate.domain.models import (
    DimensionUnit,
    Rate,
    RateRequest,
    RateResponse,
    ServiceLevel,
    WeightUnit,
)
from shiprate.domain.schemas import (
    AddressSchema,
    PackageSchema,
    RateRequestSchema,
    validate_rate,
    validate_rate_request,
)

log = logging.getLogger(__name__)

RATING_PATH = "/rating/v1/rate"
# Retries allowed after a 401, each preceded by a forced token refresh
MAX_AUTH_RETRIES = 1


def _format_number(value: float) -> str:
    """Render 12.0 as "12" and 12.5 as "12.5", as UPS examples do."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return str(value)


def _parse_arrival_date(value: str) -> date:
    """Parse an arrival date given as YYYY-MM-DD or YYYYMMDD."""
    value = str(value).strip()
    if len(value) == 8 and value.isdigit():
        return datetime.strptime(value, "%Y%m%d").date()
    return date.fromisoformat(value[:10])


def _carrier_error_message(payload: Dict[str, Any], default: str = "UPS API error") -> str:
    """Extract response.errors[0].message from a UPS error envelope."""
    response = payload.get("response")
    if not isinstance(response, dict):
        return default
    errors = response.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        return errors[0].get("message") or default
    return default


class UPSRatingService:
    """
    UPS Rating API client.

    Converts between domain models and UPS-specific JSON, and owns the
    single 401 refresh-and-retry policy.
    """

    def __init__(self, auth_client: AuthClient, api_base_url: str, timeout: float = 30):
        """
        Initialize the rating service.

        Args:
            auth_client: Token source for the bearer header
            api_base_url: UPS API base (e.g. https://onlinetools.ups.com/api)
            timeout: HTTP timeout in seconds for the rating call
        """
        if not api_base_url:
            raise ValueError("UPS API base URL is required.")
        self.auth_client = auth_client
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout

    @property
    def rating_url(self) -> str:
        return f"{self.api_base_url}{RATING_PATH}"

    def get_rates(self, request: RateRequest) -> RateResponse:
        """
        Get normalized rate quotes from UPS.

        Args:
            request: Shipment to rate

        Returns:
            RateResponse with at least one Rate, in UPS response order

        Raises:
            CarrierError: VALIDATION before any network call; AUTHENTICATION,
                NETWORK, RATE_LIMIT, API or UNEXPECTED from the request phase;
                NO_RATES_FOUND or INVALID_RESPONSE from parsing
        """
        try:
            validated = validate_rate_request(request)
        except ValidationError as e:
            log.warning("Rate request failed validation with %d error(s)", e.error_count())
            raise CarrierError.validation(
                "Invalid rate request",
                carrier=CARRIER_NAME,
                details=e.errors(include_url=False),
                cause=e,
            ) from e

        ups_request = self.build_request(validated)
        ups_response = self._post_rating_request(ups_request)
        response = self.parse_response(ups_response)
        log.info("UPS returned %d rate(s) (request_id=%s)", len(response.rates), response.request_id)
        return response

    # ---------------------------------------------------------------- request

    def build_request(self, request: Union[RateRequest, RateRequestSchema]) -> Dict[str, Any]:
        """
        Build a UPS Rating API request body.

        A single package is sent as an object, several as a list; UPS treats
        the two shapes differently, so the distinction is kept.
        """
        packages = [self._convert_package(pkg) for pkg in request.packages]
        shipment: Dict[str, Any] = {
            "Shipper": {"Address": self._convert_address(request.origin)},
            "ShipTo": {"Address": self._convert_address(request.destination)},
            "Package": packages[0] if len(packages) == 1 else packages,
        }

        if request.service_level is not None:
            code = service_code_for(ServiceLevel(request.service_level))
            if code is not None:
                shipment["Service"] = {"Code": code}
            else:
                log.debug("No UPS service code for %s, requesting all services", request.service_level)

        context = f"Rate-{int(datetime.now(timezone.utc).timestamp() * 1000)}"
        return {
            "RateRequest": {
                "Request": {"TransactionReference": {"CustomerContext": context}},
                "Shipment": shipment,
            }
        }

    @staticmethod
    def _convert_address(address: AddressSchema) -> Dict[str, Any]:
        converted: Dict[str, Any] = {
            "AddressLine": list(address.street_lines),
            "City": address.city,
            "StateProvinceCode": address.state_or_province,
            "PostalCode": address.postal_code,
            "CountryCode": address.country_code.upper(),
        }
        if address.residential:
            converted["ResidentialAddressIndicator"] = ""
        return converted

    @staticmethod
    def _convert_package(pkg: PackageSchema) -> Dict[str, Any]:
        dimension_unit = DimensionUnit(pkg.dimension_unit)
        weight_unit = WeightUnit(pkg.weight_unit)
        return {
            "PackagingType": {
                "Code": DEFAULT_PACKAGING_CODE,
                "Description": DEFAULT_PACKAGING_DESCRIPTION,
            },
            "Dimensions": {
                "UnitOfMeasurement": {
                    "Code": dimension_unit.value,
                    "Description": DIMENSION_UNIT_LABELS[dimension_unit],
                },
                "Length": _format_number(pkg.length),
                "Width": _format_number(pkg.width),
                "Height": _format_number(pkg.height),
            },
            "PackageWeight": {
                "UnitOfMeasurement": {
                    "Code": weight_unit.value,
                    "Description": WEIGHT_UNIT_LABELS[weight_unit],
                },
                "Weight": _format_number(pkg.weight),
            },
        }

    # ---------------------------------------------------------------- transport

    def _post_rating_request(self, ups_request: Dict[str, Any]) -> Any:
        """
        POST the rating request, retrying once with a fresh token on 401.

        A 401 on the retry is reported like any other HTTP error.
        """
        for attempt in range(MAX_AUTH_RETRIES + 1):
            access_token = self.auth_client.get_access_token()
            try:
                log.debug("POST %s (attempt %d)", self.rating_url, attempt + 1)
                resp = requests.post(
                    self.rating_url,
                    json=ups_request,
                    headers={
                        "Authorization": f"Bearer {access_token}",
                        "Content-Type": "application/json",
                    },
                    timeout=self.timeout,
                )
                resp.raise_for_status()
            except requests.exceptions.Timeout as e:
                log.error("UPS rating request timed out after %s seconds", self.timeout)
                raise CarrierError.network("Request timed out", carrier=CARRIER_NAME, cause=e) from e
            except requests.exceptions.HTTPError as e:
                status = e.response.status_code if e.response is not None else None
                if status == 401 and attempt < MAX_AUTH_RETRIES:
                    log.warning("UPS rating returned 401, refreshing token and retrying")
                    self.auth_client.refresh_token()
                    continue
                raise self._classify_http_error(e) from e
            except requests.exceptions.RequestException as e:
                log.error("UPS rating request failed (network/connection error): %s", e)
                raise CarrierError.network(
                    "Network error while fetching rates", carrier=CARRIER_NAME, cause=e
                ) from e
            except Exception as e:
                log.exception("Unexpected error during UPS rating request")
                raise CarrierError.unexpected(
                    "Unexpected error during rating request", carrier=CARRIER_NAME, cause=e
                ) from e

            return self._decode_body(resp)

    def _classify_http_error(self, exc: requests.exceptions.HTTPError) -> CarrierError:
        response = exc.response
        if response is None:
            return CarrierError.network(
                "Network error while fetching rates", carrier=CARRIER_NAME, cause=exc
            )

        status = response.status_code
        payload = error_payload(response)
        if status == 429:
            retry_after = parse_retry_after(response.headers.get("Retry-After"))
            log.error("UPS rate limit exceeded (retry-after=%s)", retry_after)
            return CarrierError.rate_limit(
                "Rate limit exceeded",
                retry_after=retry_after,
                carrier=CARRIER_NAME,
                details=payload,
                cause=exc,
            )

        message = _carrier_error_message(payload)
        log.error("UPS API error: status=%d message=%s", status, message)
        return CarrierError.api(
            message,
            status,
            carrier=CARRIER_NAME,
            details=payload,
            cause=exc,
        )

    @staticmethod
    def _decode_body(resp: requests.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            log.error("UPS rating response is not valid JSON")
            raise CarrierError.invalid_response(
                "Failed to parse UPS response",
                carrier=CARRIER_NAME,
                details={"raw": (resp.text or "")[:RAW_BODY_LIMIT]},
                cause=e,
            ) from e

    # ---------------------------------------------------------------- response

    def parse_response(self, ups_response: Any) -> RateResponse:
        """
        Convert a UPS rating response into a RateResponse.

        RatedShipment may be a single object or a list; both normalize to a
        list. Rates keep UPS order.

        Raises:
            CarrierError: NO_RATES_FOUND for an empty list, INVALID_RESPONSE
                for any structural problem (the raw payload is in details)
        """
        try:
            rate_response = ups_response["RateResponse"]
            rated = rate_response["RatedShipment"]
            if isinstance(rated, dict):
                rated = [rated]
            elif not isinstance(rated, list):
                raise TypeError(f"RatedShipment has unexpected type {type(rated).__name__}")

            rates: List[Rate] = [self._convert_to_rate(shipment) for shipment in rated]
            if not rates:
                raise CarrierError.no_rates_found(carrier=CARRIER_NAME)

            return RateResponse(rates=tuple(rates), request_id=self._request_id(rate_response))
        except CarrierError:
            raise
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            log.error("UPS rating response malformed: %s", e)
            raise CarrierError.invalid_response(
                "Failed to parse UPS response",
                carrier=CARRIER_NAME,
                details=ups_response,
                cause=e,
            ) from e

    @staticmethod
    def _request_id(rate_response: Dict[str, Any]) -> Optional[str]:
        reference = (rate_response.get("Response") or {}).get("TransactionReference") or {}
        return reference.get("CustomerContext")

    @staticmethod
    def _convert_to_rate(shipment: Dict[str, Any]) -> Rate:
        service = shipment["Service"]
        code = str(service["Code"])
        totals = shipment["TotalCharges"]

        fields: Dict[str, Any] = {
            "carrier": CARRIER_NAME,
            "service": service.get("Description") or f"UPS {code}",
            "service_level": service_level_for(code),
            "total_charges": float(totals["MonetaryValue"]),
            "currency": totals["CurrencyCode"],
        }

        guaranteed = shipment.get("GuaranteedDelivery")
        if guaranteed:
            fields["transit_days"] = int(guaranteed["BusinessDaysInTransit"])
            fields["delivery_guarantee"] = True

        summary = (shipment.get("TimeInTransit") or {}).get("ServiceSummary") or {}
        arrival = (summary.get("EstimatedArrival") or {}).get("Arrival") or {}
        if arrival.get("Date"):
            fields["estimated_delivery_date"] = _parse_arrival_date(arrival["Date"])

        rate = Rate(**fields)
        validate_rate(rate)
        return rate
