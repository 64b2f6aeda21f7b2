# src/shiprate/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from shiprate.shared.validators import validate_credential, validate_http_url
from shiprate.shared.logging_conf import setup_logging

__all__ = [
    "validate_credential",
    "validate_http_url",
    "setup_logging",
]
