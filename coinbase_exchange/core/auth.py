"""Request signing for the Coinbase Exchange API."""

from __future__ import annotations

import base64
import binascii
import hmac
import json
from dataclasses import dataclass, field
from hashlib import sha256
from typing import Any

from .errors import SignatureInputError

BODYLESS_METHODS = frozenset({"GET", "DELETE"})


def serialize_body(body: Any) -> str:
    """Serialize a request body exactly as it is signed and sent."""

    if body is None:
        return ""
    if isinstance(body, bytes):
        return body.decode("utf-8")
    if isinstance(body, str):
        return body
    return json.dumps(body, separators=(",", ":"))


def decode_secret(secret: str) -> bytes:
    if not secret:
        raise SignatureInputError("API secret is empty")
    try:
        key = base64.b64decode(secret, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SignatureInputError("API secret is not valid base64") from exc
    if not key:
        raise SignatureInputError("API secret decodes to an empty key")
    return key


def sign(
    secret: str,
    endpoint: str,
    method: str,
    body: Any,
    timestamp: int | float | str,
) -> str:
    """Return the base64 HMAC-SHA256 signature for ``CB-ACCESS-SIGN``.

    The signed message is ``timestamp + METHOD + "/" + endpoint + body``.
    GET and DELETE requests always sign an empty body.
    """

    method = method.upper()
    payload = "" if method in BODYLESS_METHODS else serialize_body(body)
    message = f"{timestamp}{method}/{endpoint}{payload}"
    digest = hmac.new(decode_secret(secret), message.encode("utf-8"), sha256).digest()
    return base64.b64encode(digest).decode("utf-8")


@dataclass(frozen=True)
class Credentials:
    """API key material. Secret and passphrase never appear in ``repr``."""

    api_key: str
    api_secret: str = field(repr=False)
    passphrase: str = field(repr=False)

    def validate(self) -> None:
        if not self.api_key:
            raise SignatureInputError("API key is empty")
        if not self.passphrase:
            raise SignatureInputError("API passphrase is empty")
        decode_secret(self.api_secret)

    def sign(self, endpoint: str, method: str, body: Any, timestamp: int | float | str) -> str:
        return sign(self.api_secret, endpoint, method, body, timestamp)

    def headers(
        self,
        endpoint: str,
        method: str,
        body: Any,
        timestamp: int | float | str,
    ) -> dict[str, str]:
        """Authentication headers for one request, all built from ``timestamp``."""

        return {
            "CB-ACCESS-KEY": self.api_key,
            "CB-ACCESS-TIMESTAMP": str(timestamp),
            "CB-ACCESS-PASSPHRASE": self.passphrase,
            "CB-ACCESS-SIGN": self.sign(endpoint, method, body, timestamp),
        }


__all__ = ["BODYLESS_METHODS", "Credentials", "decode_secret", "serialize_body", "sign"]
