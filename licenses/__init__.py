"""
Licenses module - offline license parsing and verification.

This module handles:
- License entity and envelope format
- Canonical signed-data form
- Signature verification (port and RSA adapter)
"""
