"""High level client exposing every REST resource."""

from __future__ import annotations

from typing import Any

from .config import Settings
from .core.client import CoinbaseClient
from .resources import (
    AccountsMixin,
    FeesMixin,
    OrdersMixin,
    ProductsMixin,
    ProfilesMixin,
    UsersMixin,
    WalletsMixin,
)


class CoinbaseExchange(
    AccountsMixin,
    WalletsMixin,
    FeesMixin,
    OrdersMixin,
    ProductsMixin,
    ProfilesMixin,
    UsersMixin,
    CoinbaseClient,
):
    """Coinbase Exchange REST API with one method per endpoint.

    Every method returns a ``Success``, ``ApiError`` or ``TransportError``.
    """

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> CoinbaseExchange:
        options: dict[str, Any] = {
            "api_target": settings.api_target,
            "sandbox": settings.sandbox,
            "base_url": settings.base_url,
            "timeout": settings.timeout,
            "max_redirects": settings.max_redirects,
            "escape_params": settings.escape_params,
            "sign_query_string": settings.sign_query_string,
        }
        options.update(kwargs)
        return cls(settings.credentials(), **options)


__all__ = ["CoinbaseExchange"]
