# src/shiprate/shared/validators.py
"""
Input Validation Utilities - Configuration Validation

This module provides small validation functions used by the settings layer.
It checks API credentials and endpoint URLs so that misconfiguration fails
at load time instead of on the first carrier call.

Files that USE this module:
- shiprate.config.settings (uses validation functions in Settings field validators)

Files that this module USES:
- None (pure utility functions)
"""
import re
from urllib.parse import urlparse


def validate_credential(value: str, min_length: int = 1) -> bool:
    """
    Validate an OAuth client id or secret.

    Args:
        value: Credential to validate
        min_length: Minimum length requirement

    Returns:
        True if valid, False otherwise
    """
    if not value:
        return False

    # Credentials never contain whitespace; a stray space usually means a bad .env line
    return len(value) >= min_length and not re.search(r"\s", value)


def validate_http_url(url: str) -> bool:
    """
    Validate that a URL is an absolute http(s) URL with a host.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url:
        return False

    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
