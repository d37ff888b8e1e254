"""Client library for the Coinbase Exchange REST API."""

from .config import Settings, load_settings
from .core import (
    ApiError,
    AsyncCoinbaseClient,
    CoinbaseAPIError,
    CoinbaseClient,
    CoinbaseError,
    CoinbaseTransportError,
    Credentials,
    MalformedResponse,
    RequestCancelled,
    RequestSpec,
    SignatureInputError,
    Success,
    TimeRange,
    TransportError,
    encode_params,
    format_timestamp,
    sign,
)
from .exchange import CoinbaseExchange

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "AsyncCoinbaseClient",
    "CoinbaseAPIError",
    "CoinbaseClient",
    "CoinbaseError",
    "CoinbaseExchange",
    "CoinbaseTransportError",
    "Credentials",
    "MalformedResponse",
    "RequestCancelled",
    "RequestSpec",
    "Settings",
    "SignatureInputError",
    "Success",
    "TimeRange",
    "TransportError",
    "encode_params",
    "format_timestamp",
    "load_settings",
    "sign",
]
