"""
RSA signature verifier.

Implements SignatureVerifier with the ``cryptography`` library using
PKCS#1 v1.5 padding, matching the issuing tool's signatures.
"""

import logging

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from core.domain.value_objects import RsaPublicKey
from licenses.ports.signature_verifier import SignatureVerifier
from OfflineLicensing.settings import base as settings

logger = logging.getLogger(__name__)

HASH_ALGORITHMS = {
    "SHA1": hashes.SHA1,
    "SHA256": hashes.SHA256,
}


class RsaSignatureVerifier(SignatureVerifier):
    """
    RSA verifier implementing SignatureVerifier.

    Holds only the public key numbers. The key object is imported
    again for every verification and dropped right after use.
    """

    def __init__(self, public_key: RsaPublicKey, hash_name: str = settings.LICENSE_SIGNATURE_HASH):
        """
        Initialize verifier.

        Args:
            public_key: Issuer public key
            hash_name: Digest name, one of HASH_ALGORITHMS
        """
        if hash_name not in HASH_ALGORITHMS:
            raise ValueError(f"Unsupported signature hash: {hash_name}")
        self.public_key = public_key
        self.hash_name = hash_name

    def _load_key(self) -> rsa.RSAPublicKey:
        numbers = rsa.RSAPublicNumbers(self.public_key.exponent, self.public_key.modulus)
        return numbers.public_key()

    def verify(self, data: bytes, signature: bytes) -> bool:
        """
        Check an RSA signature over a data buffer.

        Args:
            data: Exact bytes that were signed
            signature: Signature bytes

        Returns:
            True if the signature matches, False otherwise
        """
        try:
            key = self._load_key()
            key.verify(
                signature,
                data,
                padding.PKCS1v15(),
                HASH_ALGORITHMS[self.hash_name](),
            )
        except InvalidSignature:
            logger.debug("License signature does not match (%d bytes)", len(signature or b""))
            return False
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            logger.warning("License signature could not be checked: %s", e)
            return False
        return True

    def __repr__(self) -> str:
        return f"RsaSignatureVerifier({self.public_key}, hash={self.hash_name})"


def get_default_verifier() -> RsaSignatureVerifier:
    """Build a verifier for the embedded issuer key."""
    return RsaSignatureVerifier(RsaPublicKey.from_xml(settings.LICENSE_PUBLIC_KEY_XML))
