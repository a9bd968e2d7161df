"""
Base settings for OfflineLicensing.

These values are fixed at build time. Replacing the public key
invalidates every license issued under the previous one.
"""

# Issuer public key in .NET RSAKeyValue XML form (base64 big-endian numbers)
LICENSE_PUBLIC_KEY_XML = (
    "<RSAKeyValue>"
    "<Modulus>8CKn78RI6h7vNOPMeMCeRCHegEgG1nR+X84B8b3sOZF6hAjDXF80ag1Zw1T0E+NVHmbPB8aLgRPmQPA351ZR8D+B"
    "CHooDlGqstLLHiqTu9bbqRVPti46XBeju3Fbi47euO+omH0sq7LCuIZ5s1WBmTc9ejkkfc/0rk3fAYaIRuE=</Modulus>"
    "<Exponent>AQAB</Exponent>"
    "</RSAKeyValue>"
)

# Digest used by the issuing tool; kept for compatibility with issued licenses
LICENSE_SIGNATURE_HASH = "SHA1"

# Envelope layout
LICENSE_BEGIN_MARKER = "-----BEGIN LICENSE-----"
LICENSE_END_MARKER = "-----END LICENSE-----"
LICENSE_ENVELOPE_LINE_WIDTH = 64
