# src/shiprate/adapters/__init__.py
"""
Adapters Layer - External System Integrations

This package contains adapters that connect the domain to external systems:
- carriers: shipping carrier APIs (UPS)
"""
