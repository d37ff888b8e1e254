import pytest

from coinbase_exchange.core.errors import CoinbaseAPIError, CoinbaseTransportError
from coinbase_exchange.core.responses import (
    ApiError,
    MalformedResponse,
    RequestCancelled,
    Success,
    TransportError,
    normalize_response,
)


def test_message_field_is_an_api_error():
    result = normalize_response(401, '{"message":"Invalid API Key"}')
    assert result == ApiError("Invalid API Key", 401)
    assert not result.ok


def test_json_object_is_success():
    assert normalize_response(200, '{"id":"abc"}') == Success({"id": "abc"})


def test_plain_text_success_is_wrapped_in_a_list():
    assert normalize_response(200, "OK") == Success(["OK"])


def test_error_status_without_message():
    assert normalize_response(500, "[]") == ApiError("HTTP 500", 500)


def test_non_json_error_body_is_malformed():
    result = normalize_response(502, "<html>Bad Gateway</html>")
    assert isinstance(result, MalformedResponse)
    assert isinstance(result, ApiError)
    assert result.message.startswith("HTTP 502")


def test_unwrap_behaviour():
    assert Success([1]).unwrap() == [1]
    with pytest.raises(CoinbaseAPIError) as excinfo:
        ApiError("nope", 400).unwrap()
    assert excinfo.value.status_code == 400
    with pytest.raises(CoinbaseTransportError):
        TransportError("down").unwrap()


def test_cancellation_is_a_transport_error():
    cancelled = RequestCancelled("GET time was cancelled")
    assert isinstance(cancelled, TransportError)
    assert not cancelled.ok
