# src/shiprate/config/__init__.py
"""
Configuration Module

Provides configuration management using Pydantic Settings.
Settings are loaded explicitly with load_settings(); nothing reads the
environment at import time.
"""

from shiprate.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
