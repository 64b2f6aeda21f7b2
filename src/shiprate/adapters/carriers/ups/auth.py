# src/shiprate/adapters/carriers/ups/auth.py
"""
UPS OAuth Client - Client-Credentials Token Lifecycle

This module implements the OAuth 2.0 client-credentials exchange against
the UPS token endpoint. It owns the only piece of mutable, time-sensitive
state in the integration: the cached access token.

Token timing:
- expires_at = issue time + (expires_in - 300s), a 5 minute margin
- a cached token is used only while expires_at > now + 60s
So a one hour token is renewed six minutes before UPS would reject it.

The cache is not guarded: concurrent callers that both miss the cache each
perform an exchange and the last one to finish wins.

Files that USE this module:
- shiprate.adapters.carriers.ups.carrier (UPSCarrier builds a UPSAuthClient)
- shiprate.adapters.carriers.ups.rating (obtains and refreshes tokens)
- tests.test_ups_auth (unit tests)

Files that this module USES:
- shiprate.adapters.carriers.base (AuthClient interface)
- shiprate.adapters.carriers.http (error payload decoding)
- shiprate.domain (AuthToken, CarrierError)
"""
import base64
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import requests

from shiprate.adapters.carriers.base import AuthClient
from shiprate.adapters.carriers.http import error_payload
from shiprate.adapters.carriers.ups.codes import CARRIER_NAME
from shiprate.domain.errors import CarrierError
from shiprate.domain.models import AuthToken

log = logging.getLogger(__name__)

# Subtracted from the UPS-declared lifetime when the token is issued
EXPIRY_MARGIN = timedelta(seconds=300)
# A cached token must outlive now by at least this much to be used
VALIDITY_BUFFER = timedelta(seconds=60)


class UPSAuthClient(AuthClient):
    def __init__(
        self,
        client_id: str,
        client_secret: str,
        auth_url: str,
        timeout: float = 30,
    ):
        """
        Initialize the UPS OAuth client.

        Args:
            client_id: UPS application client id
            client_secret: UPS application client secret
            auth_url: Token endpoint URL
            timeout: HTTP timeout in seconds for the token call

        Raises:
            ValueError: If client id, secret or URL is empty
        """
        if not client_id or not client_secret:
            raise ValueError("UPS client id and client secret are required.")
        if not auth_url:
            raise ValueError("UPS auth URL is required.")
        self.client_id = client_id
        self.client_secret = client_secret
        self.auth_url = auth_url
        self.timeout = timeout
        self._cached_token: Optional[AuthToken] = None

    @property
    def cached_token(self) -> Optional[AuthToken]:
        return self._cached_token

    def get_access_token(self) -> str:
        token = self._cached_token
        if token is not None and self._is_token_valid(token):
            log.debug("Using cached UPS access token (expires at %s)", token.expires_at.isoformat())
            return token.access_token
        return self._acquire_token().access_token

    def refresh_token(self) -> None:
        self.clear_token()
        self._acquire_token()

    def clear_token(self) -> None:
        self._cached_token = None

    def _is_token_valid(self, token: AuthToken) -> bool:
        return token.expires_at > datetime.now(timezone.utc) + VALIDITY_BUFFER

    def _basic_auth_header(self) -> str:
        raw = f"{self.client_id}:{self.client_secret}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")

    def _acquire_token(self) -> AuthToken:
        """
        Exchange client credentials for a new token and cache it.

        Returns:
            The freshly cached AuthToken

        Raises:
            CarrierError: NETWORK on timeout/connection failure, AUTHENTICATION
                on an HTTP error, a malformed body or any other failure
        """
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Authorization": self._basic_auth_header(),
        }
        try:
            log.info("Requesting UPS access token")
            resp = requests.post(
                self.auth_url,
                data={"grant_type": "client_credentials"},
                headers=headers,
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except requests.exceptions.Timeout as e:
            log.error("UPS token request timed out after %s seconds", self.timeout)
            raise CarrierError.network("Token request timed out", carrier=CARRIER_NAME, cause=e) from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            payload = error_payload(e.response)
            message = (
                payload.get("error_description")
                or payload.get("message")
                or "Authentication failed"
            )
            log.error("UPS token request rejected: status=%s message=%s", status, message)
            raise CarrierError.authentication(
                message,
                carrier=CARRIER_NAME,
                status_code=status,
                details=payload,
                cause=e,
            ) from e
        except requests.exceptions.RequestException as e:
            log.error("UPS token request failed (network/connection error): %s", e)
            raise CarrierError.network(
                "Network error during authentication", carrier=CARRIER_NAME, cause=e
            ) from e
        except Exception as e:
            log.exception("Unexpected error during UPS authentication")
            raise CarrierError.authentication(
                "Unexpected error during authentication", carrier=CARRIER_NAME, cause=e
            ) from e

        token = self._parse_token(resp)
        self._cached_token = token
        log.info("UPS access token acquired (expires at %s)", token.expires_at.isoformat())
        return token

    def _parse_token(self, resp: requests.Response) -> AuthToken:
        try:
            data = resp.json()
            access_token = data.get("access_token")
            token_type = data.get("token_type") or "Bearer"
            expires_in = int(data["expires_in"])
            expires_at = datetime.now(timezone.utc) + timedelta(seconds=expires_in) - EXPIRY_MARGIN
        except (ValueError, KeyError, TypeError, AttributeError, OverflowError) as e:
            log.error("UPS token response malformed: %s", e)
            raise CarrierError.authentication(
                "Unexpected error during authentication",
                carrier=CARRIER_NAME,
                cause=e,
            ) from e

        if not access_token or not isinstance(access_token, str):
            log.error("UPS token response carried no access token")
            raise CarrierError.authentication(
                "Failed to acquire access token", carrier=CARRIER_NAME, details=data
            )

        return AuthToken(access_token=access_token, token_type=token_type, expires_at=expires_at)
