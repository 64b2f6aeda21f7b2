# src/shiprate/adapters/carriers/http.py
"""
HTTP Helpers - Shared Response Handling for Carrier Adapters

Small helpers used by every carrier adapter when turning a `requests`
error response into structured error details.

Files that USE this module:
- shiprate.adapters.carriers.ups.auth (token endpoint failures)
- shiprate.adapters.carriers.ups.rating (rating endpoint failures)

Files that this module USES:
- requests (Response objects)
"""
from typing import Any, Dict, Optional

import requests

RAW_BODY_LIMIT = 500


def error_payload(response: Optional[requests.Response]) -> Dict[str, Any]:
    """
    Best-effort decode of an error response body.

    Returns:
        The JSON object when the body is one, otherwise {"raw": <truncated text>}
    """
    if response is None:
        return {}
    try:
        data = response.json()
    except ValueError:
        return {"raw": (response.text or "")[:RAW_BODY_LIMIT]}
    if isinstance(data, dict):
        return data
    return {"raw": data}


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """
    Parse a Retry-After header given in seconds.

    HTTP-date values, negative numbers and garbage yield None.
    """
    if value is None:
        return None
    try:
        seconds = int(str(value).strip())
    except ValueError:
        return None
    return seconds if seconds >= 0 else None
