"""Normalized outcomes returned by every dispatch call."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from .errors import CoinbaseAPIError, CoinbaseTransportError


@dataclass(frozen=True)
class Success:
    value: Any
    ok: ClassVar[bool] = True

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ApiError:
    """The server answered with an error message."""

    message: str
    status_code: int | None = None
    ok: ClassVar[bool] = False

    def unwrap(self) -> Any:
        raise CoinbaseAPIError(self.message, self.status_code)


@dataclass(frozen=True)
class MalformedResponse(ApiError):
    """Error status with a body that is not JSON."""


@dataclass(frozen=True)
class TransportError:
    """The HTTP exchange failed before a response was received."""

    message: str
    ok: ClassVar[bool] = False

    def unwrap(self) -> Any:
        raise CoinbaseTransportError(self.message)


@dataclass(frozen=True)
class RequestCancelled(TransportError):
    """The in-flight request was cancelled by the caller."""


NormalizedResponse = Union[Success, ApiError, TransportError]

_SNIPPET_LENGTH = 200


def normalize_response(status_code: int, text: str) -> NormalizedResponse:
    """Classify a raw HTTP response.

    A JSON object carrying ``message`` is the server's error convention. A body
    that is not JSON is passed through as ``[text]`` for successful statuses
    (e.g. the bare id list some deletes return as text).
    """

    try:
        payload = json.loads(text)
    except ValueError:
        if status_code >= 400:
            snippet = text.strip()[:_SNIPPET_LENGTH] or "<empty body>"
            return MalformedResponse(f"HTTP {status_code}: {snippet}", status_code)
        return Success([text])

    if isinstance(payload, dict) and "message" in payload:
        return ApiError(str(payload["message"]), status_code)
    if status_code >= 400:
        return ApiError(f"HTTP {status_code}", status_code)
    return Success(payload)


__all__ = [
    "ApiError",
    "MalformedResponse",
    "NormalizedResponse",
    "RequestCancelled",
    "Success",
    "TransportError",
    "normalize_response",
]
