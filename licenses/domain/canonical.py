"""
Canonical form of the signed license data.

The issuer signs the licensee name in canonical form followed by the
license type digits. Both sides must build the buffer identically or
no signature will ever verify.
"""
import unicodedata

from core.domain.value_objects import LicenseType

# str.isspace() also matches the U+001C..U+001F separators, which the
# issuer treats as ordinary characters.
_WHITESPACE_CATEGORIES = frozenset({"Zs", "Zl", "Zp"})
_WHITESPACE_CONTROLS = frozenset("\t\n\v\f\r\x85")


def _is_whitespace(char: str) -> bool:
    return char in _WHITESPACE_CONTROLS or unicodedata.category(char) in _WHITESPACE_CATEGORIES


def _upper_invariant(value: str) -> str:
    # One-to-one mapping only: "ß".upper() is "SS" in Python but the
    # issuer keeps such characters unchanged.
    chars = []
    for char in value:
        upper = char.upper()
        chars.append(upper if len(upper) == 1 else char)
    return "".join(chars)


def canonicalize(value: str) -> str:
    """
    Normalize a licensee name for signing.

    Removes every whitespace character and uppercases the rest.

    Args:
        value: Licensee name as written in the license

    Returns:
        Canonical name, e.g. "ERIKAMUSTERMANN" for " Erika Mustermann "
    """
    return _upper_invariant("".join(char for char in value if not _is_whitespace(char)))


def build_signed_buffer(licensee: str, license_type: LicenseType) -> bytes:
    """
    Build the exact bytes covered by the license signature.

    Args:
        licensee: Licensee name (raw form)
        license_type: License type

    Returns:
        UTF-8 bytes of canonical licensee immediately followed by the type digits
    """
    return f"{canonicalize(licensee)}{int(license_type)}".encode("utf-8")
