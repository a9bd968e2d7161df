"""
Domain exceptions.

Domain exceptions represent rule violations and domain-specific
error conditions. A forged or mismatching signature is not one of
them: it is reported through ``License.is_valid``.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class LicenseException(DomainException):
    """Base exception for license-related errors."""


class LicenseFormatError(LicenseException):
    """Raised when license text does not follow the envelope grammar."""

    def __init__(self, message: str = "Malformed license text"):
        super().__init__(message, code="LICENSE_FORMAT_ERROR")


class LicenseArgumentError(DomainException, ValueError):
    """
    Raised when a License is constructed with missing arguments.

    This signals misuse of the API (bypassing the parser), not
    malformed user input.
    """

    def __init__(self, message: str = "Invalid license argument"):
        super().__init__(message, code="LICENSE_ARGUMENT_ERROR")
