"""
License domain entity.

This is the core domain entity representing an offline license.
It contains business logic and is independent of infrastructure.
"""
from dataclasses import InitVar, dataclass, field
from typing import Any, Dict, Optional

from core.domain.exceptions import LicenseArgumentError
from core.domain.value_objects import LicenseType
from licenses.domain.envelope import parse_envelope
from licenses.domain.services import LicenseSignatureValidator
from licenses.ports.signature_verifier import SignatureVerifier


@dataclass(frozen=True)
class License:
    """
    License domain entity.

    Represents a license read from text. ``is_valid`` is computed once
    from the signature when the entity is created. A license with a
    bad signature is still a complete object; callers must check
    ``is_valid`` before unlocking anything.
    """

    licensee: str
    license_type: LicenseType
    signature: InitVar[Optional[bytes]]
    verifier: InitVar[Optional[SignatureVerifier]] = None
    is_valid: bool = field(init=False)

    def __post_init__(self, signature, verifier):
        """Validate license entity and verify its signature."""
        if not self.licensee or not isinstance(self.licensee, str):
            raise LicenseArgumentError("Licensee is required")
        if signature is None:
            raise LicenseArgumentError("Signature is required")
        if not isinstance(signature, (bytes, bytearray)):
            raise LicenseArgumentError("Signature must be bytes")
        if not isinstance(self.license_type, LicenseType):
            raise LicenseArgumentError(f"Unknown license type: {self.license_type!r}")

        if verifier is None:
            from licenses.infrastructure.rsa_signature_verifier import get_default_verifier

            verifier = get_default_verifier()

        is_valid = LicenseSignatureValidator.verify(
            self.licensee, self.license_type, bytes(signature), verifier
        )
        object.__setattr__(self, "is_valid", is_valid)

    @classmethod
    def parse(cls, text: str, verifier: Optional[SignatureVerifier] = None) -> "License":
        """
        Read a License from envelope text.

        Args:
            text: License text including BEGIN/END markers
            verifier: Optional verifier (defaults to the embedded issuer key)

        Returns:
            License entity; check ``is_valid`` for the signature result

        Raises:
            LicenseFormatError: If the text is structurally malformed
            LicenseArgumentError: If the licensee line is empty
        """
        envelope = parse_envelope(text)
        return cls(
            licensee=envelope.licensee,
            license_type=envelope.license_type,
            signature=envelope.signature,
            verifier=verifier,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert license to dictionary for display."""
        return {
            "licensee": self.licensee,
            "license_type": int(self.license_type),
            "license_type_name": self.license_type.name,
            "is_valid": self.is_valid,
        }
