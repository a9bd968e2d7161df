"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
import base64
import binascii
import re
import xml.etree.ElementTree as ElementTree
from abc import ABC
from dataclasses import dataclass
from enum import IntEnum

from core.domain.exceptions import LicenseFormatError

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]{1,32}")


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


class LicenseType(IntEnum):
    """
    License type value object.

    The integer values are part of the signed data and of the
    envelope format, so they must never be renumbered.
    """

    SINGLE_USER = 0
    COMMERCIAL = 1
    OPEN_SOURCE = 2

    def __str__(self) -> str:
        """Return the integer value as string."""
        return str(self.value)

    @classmethod
    def from_value(cls, value: int) -> "LicenseType":
        """
        Match an integer against the known license types.

        Args:
            value: Integer read from untrusted input

        Returns:
            Matching LicenseType

        Raises:
            LicenseFormatError: If the value is not a known license type
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise LicenseFormatError(f"License type must be an integer, got {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise LicenseFormatError(f"Unknown license type: {value}") from None

    @classmethod
    def from_string(cls, raw: str) -> "LicenseType":
        """
        Parse the textual license type field.

        Args:
            raw: Trimmed license type line, e.g. "2"

        Returns:
            Matching LicenseType

        Raises:
            LicenseFormatError: If the text is not an integer or not a known type
        """
        if not _INTEGER_PATTERN.fullmatch(raw or ""):
            raise LicenseFormatError(f"License type is not an integer: {(raw or '')[:16]!r}")
        return cls.from_value(int(raw))


def _decode_key_integer(text: str) -> int:
    """Decode a base64 big-endian unsigned integer."""
    try:
        raw = base64.b64decode("".join(text.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 key component: {e}") from e
    if not raw:
        raise ValueError("Empty key component")
    return int.from_bytes(raw, "big")


@dataclass(frozen=True)
class RsaPublicKey(ValueObject):
    """
    RSA public key value object.

    Only the public numbers are held; the cryptographic key object
    is rebuilt by the verifier for every verification.
    """

    modulus: int
    exponent: int

    def __post_init__(self):
        """Validate key numbers."""
        if not isinstance(self.modulus, int) or self.modulus <= 0:
            raise ValueError("RSA modulus must be a positive integer")
        if not isinstance(self.exponent, int) or self.exponent <= 0:
            raise ValueError("RSA exponent must be a positive integer")

    @property
    def key_size(self) -> int:
        """Return the modulus size in bits."""
        return self.modulus.bit_length()

    @classmethod
    def from_xml(cls, xml_text: str) -> "RsaPublicKey":
        """
        Build a key from the ``<RSAKeyValue>`` XML form.

        Args:
            xml_text: XML with base64 ``Modulus`` and ``Exponent`` elements

        Returns:
            RsaPublicKey instance

        Raises:
            ValueError: If the XML or one of its components is malformed
        """
        try:
            root = ElementTree.fromstring(xml_text)
        except ElementTree.ParseError as e:
            raise ValueError(f"Invalid RSA key XML: {e}") from e

        if root.tag != "RSAKeyValue":
            raise ValueError(f"Unexpected RSA key element: {root.tag}")

        modulus = root.findtext("Modulus")
        exponent = root.findtext("Exponent")
        if not modulus or not exponent:
            raise ValueError("RSA key XML requires Modulus and Exponent")

        return cls(
            modulus=_decode_key_integer(modulus),
            exponent=_decode_key_integer(exponent),
        )

    def __str__(self) -> str:
        """Return a short description of the key."""
        return f"RSA-{self.key_size} (e={self.exponent})"
