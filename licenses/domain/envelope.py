"""
License envelope format.

A license is a BEGIN/END delimited text block:

    -----BEGIN LICENSE-----
    Erika Mustermann
    2
    <hex signature, may wrap over several lines>
    -----END LICENSE-----

Markers are case-insensitive and may use any number of dashes.
"""
import logging
import re
from dataclasses import dataclass, field

from core.domain.exceptions import LicenseArgumentError, LicenseFormatError
from core.domain.hex_codec import decode_hex, encode_hex
from core.domain.value_objects import LicenseType
from OfflineLicensing.settings import base as settings

logger = logging.getLogger(__name__)

ENVELOPE_PATTERN = re.compile(
    r"\s*-+BEGIN LICENSE-+(?P<data>.*?)-+END LICENSE-+\s*",
    re.IGNORECASE | re.DOTALL,
)


@dataclass(frozen=True)
class LicenseEnvelope:
    """Fields read from a license envelope, before verification."""

    licensee: str
    license_type: LicenseType
    signature: bytes = field(repr=False)


def _reject(reason: str) -> LicenseFormatError:
    logger.debug("Rejected license text: %s", reason)
    return LicenseFormatError(reason)


def parse_envelope(text: str) -> LicenseEnvelope:
    """
    Split license text into licensee, type and signature.

    Args:
        text: License text including BEGIN/END markers

    Returns:
        LicenseEnvelope with the raw fields

    Raises:
        LicenseFormatError: If the text is structurally malformed
    """
    if not isinstance(text, str):
        raise _reject("License text must be a string")

    match = ENVELOPE_PATTERN.fullmatch(text)
    if not match:
        raise _reject("License markers not found")

    data = match.group("data").strip()
    if not data:
        raise _reject("License is empty")

    lines = data.split("\n")
    if len(lines) < 3:
        raise _reject("License requires licensee, type and signature lines")

    licensee = lines[0].strip()
    license_type = LicenseType.from_string(lines[1].strip())
    signature_text = "".join("".join(lines[2:]).split())

    return LicenseEnvelope(
        licensee=licensee,
        license_type=license_type,
        signature=decode_hex(signature_text),
    )


def format_envelope(
    licensee: str,
    license_type: LicenseType,
    signature: bytes,
    line_width: int = settings.LICENSE_ENVELOPE_LINE_WIDTH,
) -> str:
    """
    Render license fields as envelope text.

    Args:
        licensee: Licensee name
        license_type: License type
        signature: Signature bytes
        line_width: Hex characters per signature line (even, at least 2)

    Returns:
        License text that parse_envelope reads back unchanged
    """
    if line_width < 2 or line_width % 2 != 0:
        raise ValueError("Line width must be an even number of at least 2")
    if not licensee or not licensee.strip():
        raise LicenseArgumentError("Licensee is required")
    if "\n" in licensee or "\r" in licensee:
        raise LicenseArgumentError("Licensee must be a single line")
    if not signature:
        raise LicenseArgumentError("Signature is required")

    signature_hex = encode_hex(signature)
    signature_lines = [
        signature_hex[i:i + line_width] for i in range(0, len(signature_hex), line_width)
    ]

    return "\n".join(
        [
            settings.LICENSE_BEGIN_MARKER,
            licensee.strip(),
            str(LicenseType.from_value(int(license_type))),
            *signature_lines,
            settings.LICENSE_END_MARKER,
        ]
    )
