"""
Pytest configuration and shared fixtures.
"""

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from core.domain.value_objects import LicenseType, RsaPublicKey
from licenses.domain.canonical import build_signed_buffer
from licenses.domain.envelope import format_envelope
from licenses.infrastructure.rsa_signature_verifier import RsaSignatureVerifier
from licenses.ports.signature_verifier import SignatureVerifier


class RecordingVerifier(SignatureVerifier):
    """Verifier double that records calls and returns a fixed result."""

    def __init__(self, result: bool = True):
        self.result = result
        self.calls = []

    def verify(self, data: bytes, signature: bytes) -> bool:
        self.calls.append((data, signature))
        return self.result


@pytest.fixture(scope="session")
def private_key():
    """Fixture for a throwaway issuer private key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def public_key(private_key):
    """Fixture for the RsaPublicKey matching private_key."""
    numbers = private_key.public_key().public_numbers()
    return RsaPublicKey(modulus=numbers.n, exponent=numbers.e)


@pytest.fixture
def verifier(public_key):
    """Fixture for a verifier trusting the test issuer key."""
    return RsaSignatureVerifier(public_key)


@pytest.fixture
def sign(private_key):
    """Fixture returning a function that signs bytes like the issuing tool."""

    def _sign(data: bytes) -> bytes:
        return private_key.sign(data, padding.PKCS1v15(), hashes.SHA1())

    return _sign


@pytest.fixture
def issue_license(sign):
    """Fixture returning a function that issues envelope text."""

    def _issue(licensee: str, license_type: LicenseType = LicenseType.COMMERCIAL, **kwargs) -> str:
        signature = sign(build_signed_buffer(licensee, license_type))
        return format_envelope(licensee, license_type, signature, **kwargs)

    return _issue


@pytest.fixture
def recording_verifier():
    """Fixture for a verifier double that accepts every signature."""
    return RecordingVerifier()
