"""
Custom exceptions for gpsoauth token requests.

Every failure is terminal for the call in which it occurs. Callers that only
care whether a token could be obtained can catch ``TokenRequestFailed``;
callers that want diagnostics can catch the specific subclasses.
"""
from typing import Optional


class GpsoauthError(Exception):
    """Base exception for all aiogpsoauth errors."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)


class CryptoUnavailable(GpsoauthError):
    """Raised when the credential signature cannot be produced.

    This covers a public key that cannot be constructed and an encryption
    failure (e.g. a plaintext exceeding the OAEP capacity of the key). It is
    a configuration error and never worth retrying.
    """
    pass


class TokenRequestFailed(GpsoauthError):
    """Raised when a master login or OAuth exchange does not yield a token."""

    def __init__(self, message: str = "Token request failed") -> None:
        super().__init__(message)


class TransportError(TokenRequestFailed):
    """Raised when the transport could not complete the request.

    The originating exception is available as ``__cause__``.
    """

    def __init__(self, message: str = "Transport failure") -> None:
        super().__init__(message)


class UnexpectedStatus(TokenRequestFailed):
    """Raised for any HTTP status other than 200."""

    def __init__(self, status: int) -> None:
        """
        Initialize the exception.

        Args:
            status: HTTP status code returned by the server
        """
        self.status = status
        super().__init__(f"Unexpected HTTP status {status}")


class MalformedResponse(TokenRequestFailed):
    """Raised when a required field is missing or cannot be parsed."""

    def __init__(self, field: str, detail: Optional[str] = None) -> None:
        """
        Initialize the exception.

        Args:
            field: Name of the response field that was expected
            detail: Server supplied error text (the ``Error`` field), if any
        """
        self.field = field
        self.detail = detail
        message = f"Missing or invalid field '{field}' in response"
        if detail:
            message = f"{message} (server error: {detail})"
        super().__init__(message)
