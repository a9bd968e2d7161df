"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
import logging

from core.domain.value_objects import LicenseType
from licenses.domain.canonical import build_signed_buffer
from licenses.ports.signature_verifier import SignatureVerifier

logger = logging.getLogger(__name__)


class LicenseSignatureValidator:
    """Domain service for license signature verification."""

    @staticmethod
    def verify(
        licensee: str,
        license_type: LicenseType,
        signature: bytes,
        verifier: SignatureVerifier,
    ) -> bool:
        """
        Verify the signature of license data.

        Args:
            licensee: Licensee name as written in the license
            license_type: License type
            signature: Signature bytes from the license
            verifier: Signature verifier holding the issuer key

        Returns:
            True if the signature covers exactly this licensee and type
        """
        data = build_signed_buffer(licensee, license_type)
        is_valid = verifier.verify(data, signature)
        logger.debug(
            "Verified license signature: type=%s valid=%s", license_type.name, is_valid
        )
        return is_valid
