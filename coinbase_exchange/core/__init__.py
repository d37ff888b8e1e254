"""Core signing and dispatch pipeline."""

from .async_client import AsyncCoinbaseClient
from .auth import Credentials, serialize_body, sign
from .client import API_TARGETS, CoinbaseClient, RequestSpec, resolve_base_url
from .errors import CoinbaseAPIError, CoinbaseError, CoinbaseTransportError, SignatureInputError
from .params import encode_params
from .ranges import MAX_CANDLES_PER_REQUEST, RangeChunks, TimeRange, iter_time_ranges
from .responses import (
    ApiError,
    MalformedResponse,
    NormalizedResponse,
    RequestCancelled,
    Success,
    TransportError,
    normalize_response,
)
from .timeutil import format_timestamp, to_datetime

__all__ = [
    "API_TARGETS",
    "ApiError",
    "AsyncCoinbaseClient",
    "CoinbaseAPIError",
    "CoinbaseClient",
    "CoinbaseError",
    "CoinbaseTransportError",
    "Credentials",
    "MAX_CANDLES_PER_REQUEST",
    "MalformedResponse",
    "NormalizedResponse",
    "RangeChunks",
    "RequestCancelled",
    "RequestSpec",
    "SignatureInputError",
    "Success",
    "TimeRange",
    "TransportError",
    "encode_params",
    "format_timestamp",
    "iter_time_ranges",
    "normalize_response",
    "resolve_base_url",
    "serialize_body",
    "sign",
    "to_datetime",
]
