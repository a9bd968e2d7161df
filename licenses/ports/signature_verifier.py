"""
Signature verifier port (interface).

This defines the contract for checking a signature over a byte buffer.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod


class SignatureVerifier(ABC):
    """
    Abstract verifier for license signatures.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    def verify(self, data: bytes, signature: bytes) -> bool:
        """
        Check a signature over a data buffer.

        Implementations must return False instead of raising when the
        signature does not match or any key or signature material is
        malformed.

        Args:
            data: Exact bytes that were signed
            signature: Signature bytes

        Returns:
            True if the signature matches, False otherwise
        """
        pass
