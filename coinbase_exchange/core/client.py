"""REST dispatcher for the Coinbase Exchange API."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import requests

from .auth import BODYLESS_METHODS, Credentials, serialize_body
from .errors import SignatureInputError
from .params import encode_params
from .responses import NormalizedResponse, TransportError, normalize_response

LOGGER = logging.getLogger(__name__)

API_TARGETS = {
    "exchange": "https://api.exchange.coinbase.com/",
    "sandbox": "https://api-public.sandbox.exchange.coinbase.com/",
    "pro": "https://api.pro.coinbase.com/",
    "gdax": "https://api.gdax.com/",
}
DEFAULT_TIMEOUT = 30
DEFAULT_MAX_REDIRECTS = 10
USER_AGENT = "coinbase-exchange-python/0.1"
METHODS = frozenset({"GET", "POST", "DELETE"})


def resolve_base_url(
    api_target: str = "exchange",
    *,
    sandbox: bool = False,
    base_url: str | None = None,
) -> str:
    if base_url:
        return base_url if base_url.endswith("/") else f"{base_url}/"
    target = "sandbox" if sandbox else api_target
    try:
        return API_TARGETS[target]
    except KeyError:
        raise ValueError(
            f"Unknown API target {target!r}; expected one of {sorted(API_TARGETS)}"
        ) from None


@dataclass(frozen=True)
class RequestSpec:
    """Everything needed to perform one API call."""

    endpoint: str
    method: str = "GET"
    is_public: bool = True
    query_params: Mapping[str, Any] = field(default_factory=dict)
    body: Any = None
    timestamp: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        if self.method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method}")
        if self.endpoint.startswith("/"):
            raise ValueError(f"Endpoint must not start with '/': {self.endpoint!r}")

    @property
    def has_body(self) -> bool:
        return self.method not in BODYLESS_METHODS and self.body is not None


class PreparedRequest:
    """Resolved URL, headers and payload for one dispatch.

    Shared by the sync and async clients so both sign identically.
    """

    def __init__(
        self,
        spec: RequestSpec,
        base_url: str,
        credentials: Credentials | None,
        clock: Callable[[], float],
        *,
        escape_params: bool = True,
        sign_query_string: bool = False,
        user_agent: str = USER_AGENT,
    ) -> None:
        query = encode_params(spec.query_params, escape=escape_params)
        self.method = spec.method
        self.url = f"{base_url}{spec.endpoint}{query}"
        self.data = serialize_body(spec.body) if spec.has_body else None
        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": user_agent,
        }
        self.timestamp: int | None = None
        if not spec.is_public:
            if credentials is None:
                raise SignatureInputError(
                    f"Private endpoint {spec.endpoint!r} requires API credentials"
                )
            credentials.validate()
            # Captured once: the header and the signature must carry the same value.
            self.timestamp = spec.timestamp if spec.timestamp is not None else int(clock())
            signed_path = f"{spec.endpoint}{query}" if sign_query_string else spec.endpoint
            self.headers.update(
                credentials.headers(signed_path, spec.method, self.data, self.timestamp)
            )


class CoinbaseClient:
    """Blocking Coinbase Exchange REST client."""

    def __init__(
        self,
        credentials: Credentials | None = None,
        *,
        api_target: str = "exchange",
        sandbox: bool = False,
        base_url: str | None = None,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        escape_params: bool = True,
        sign_query_string: bool = False,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.credentials = credentials
        self.base_url = resolve_base_url(api_target, sandbox=sandbox, base_url=base_url)
        self.session = session or requests.Session()
        self.session.max_redirects = max_redirects
        self.timeout = timeout
        self.escape_params = escape_params
        self.sign_query_string = sign_query_string
        self.clock = clock

    def prepare(self, spec: RequestSpec) -> PreparedRequest:
        return PreparedRequest(
            spec,
            self.base_url,
            self.credentials,
            self.clock,
            escape_params=self.escape_params,
            sign_query_string=self.sign_query_string,
        )

    def dispatch(self, spec: RequestSpec) -> NormalizedResponse:
        """Perform ``spec`` and return exactly one normalized outcome.

        Raises ``SignatureInputError`` before any network activity when a
        private call cannot be signed.
        """

        prepared = self.prepare(spec)
        try:
            response = self.session.request(
                prepared.method,
                prepared.url,
                headers=prepared.headers,
                data=prepared.data,
                timeout=self.timeout,
                allow_redirects=True,
            )
        except requests.RequestException as exc:
            LOGGER.warning("%s %s failed: %s", spec.method, spec.endpoint, exc)
            return TransportError(f"{type(exc).__name__}: {exc}")

        result = normalize_response(response.status_code, response.text)
        LOGGER.debug(
            "%s %s -> %s (%s)",
            spec.method,
            spec.endpoint,
            response.status_code,
            type(result).__name__,
        )
        return result

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        public: bool = True,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
        timestamp: int | None = None,
    ) -> NormalizedResponse:
        spec = RequestSpec(
            endpoint=endpoint,
            method=method,
            is_public=public,
            query_params=params or {},
            body=body,
            timestamp=timestamp,
        )
        return self.dispatch(spec)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> CoinbaseClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = [
    "API_TARGETS",
    "CoinbaseClient",
    "DEFAULT_MAX_REDIRECTS",
    "DEFAULT_TIMEOUT",
    "PreparedRequest",
    "RequestSpec",
    "resolve_base_url",
]
