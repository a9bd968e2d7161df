"""
Core module for shared domain building blocks.

This module contains:
- Domain exceptions
- Value objects (license types, RSA public keys)
- Hex codec for signature text
"""
