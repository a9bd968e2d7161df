"""
Hexadecimal codec for signature text.

Hex is used instead of base64 so that a license typed in by hand
survives any change of letter case.
"""
import binascii
from typing import Optional

from core.domain.exceptions import LicenseFormatError


def decode_hex(value: Optional[str]) -> bytes:
    """
    Decode case-insensitive hex text into bytes.

    Args:
        value: Hex text (None or blank decodes to empty bytes)

    Returns:
        Decoded bytes

    Raises:
        LicenseFormatError: If the length is odd or a character is not hex
    """
    if value is None:
        return b""
    if len(value) % 2 != 0:
        raise LicenseFormatError("Signature hex text has odd length")
    if not value.strip():
        return b""

    try:
        return binascii.unhexlify(value.encode("ascii"))
    except (UnicodeEncodeError, binascii.Error) as e:
        raise LicenseFormatError(f"Signature is not valid hex text: {e}") from e


def encode_hex(data: Optional[bytes]) -> str:
    """Encode bytes as uppercase hex text."""
    if not data:
        return ""
    return binascii.hexlify(data).decode("ascii").upper()
