"""Exception hierarchy for the Coinbase Exchange client."""

from __future__ import annotations


class CoinbaseError(RuntimeError):
    """Base exception for all client failures."""


class CoinbaseAPIError(CoinbaseError):
    """Raised by ``unwrap()`` when the server reported an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CoinbaseTransportError(CoinbaseError):
    """Raised by ``unwrap()`` when the request never produced a response."""


class SignatureInputError(CoinbaseError):
    """Credentials are missing or the secret cannot be used as an HMAC key."""


__all__ = [
    "CoinbaseError",
    "CoinbaseAPIError",
    "CoinbaseTransportError",
    "SignatureInputError",
]
