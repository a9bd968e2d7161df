"""
Settings module.

This package contains:
- base.py: Build-time constants (embedded issuer key, envelope layout)
- logging.py: Logging configuration
"""
