from __future__ import annotations

import base64
import hashlib
import hmac

import pytest

from coinbase_exchange.core.auth import Credentials, serialize_body, sign
from coinbase_exchange.core.errors import SignatureInputError

from .helpers import SECRET


def expected_signature(message: str) -> str:
    digest = hmac.new(base64.b64decode(SECRET), message.encode(), hashlib.sha256).digest()
    return base64.b64encode(digest).decode()


def test_signature_matches_reference_hmac():
    body = {"size": "0.01", "price": "100.0", "side": "buy", "product_id": "BTC-USD"}
    signature = sign(SECRET, "orders", "post", body, 1415262887)
    message = '1415262887POST/orders{"size":"0.01","price":"100.0","side":"buy","product_id":"BTC-USD"}'
    assert signature == expected_signature(message)


def test_signature_is_deterministic():
    first = sign(SECRET, "accounts", "GET", None, 1700000000)
    second = sign(SECRET, "accounts", "GET", None, 1700000000)
    assert first == second


def test_changing_body_changes_signature():
    base = sign(SECRET, "orders", "POST", '{"size":"1"}', 1700000000)
    changed = sign(SECRET, "orders", "POST", '{"size":"2"}', 1700000000)
    assert base != changed


def test_changing_timestamp_changes_signature():
    assert sign(SECRET, "accounts", "GET", None, 1) != sign(SECRET, "accounts", "GET", None, 2)


@pytest.mark.parametrize("method", ["GET", "DELETE", "get"])
def test_bodyless_methods_sign_empty_body(method):
    signature = sign(SECRET, "orders", method, {"ignored": True}, 1700000000)
    assert signature == expected_signature(f"1700000000{method.upper()}/orders")


def test_query_string_is_not_part_of_get_signature():
    assert sign(SECRET, "orders", "GET", None, 5) == expected_signature("5GET/orders")


def test_serialize_body_forms():
    assert serialize_body(None) == ""
    assert serialize_body('{"a":1}') == '{"a":1}'
    assert serialize_body({"a": 1, "b": [1, 2]}) == '{"a":1,"b":[1,2]}'
    assert serialize_body(b'{"a":1}') == '{"a":1}'


@pytest.mark.parametrize("secret", ["", "not base64!!", "YQ"])
def test_invalid_secret_fails_fast(secret):
    with pytest.raises(SignatureInputError):
        sign(secret, "accounts", "GET", None, 1)


def test_credentials_headers_share_one_timestamp(credentials):
    headers = credentials.headers("accounts", "GET", None, 1700000000)
    assert headers["CB-ACCESS-KEY"] == "key-123"
    assert headers["CB-ACCESS-PASSPHRASE"] == "pass-phrase"
    assert headers["CB-ACCESS-TIMESTAMP"] == "1700000000"
    assert headers["CB-ACCESS-SIGN"] == expected_signature("1700000000GET/accounts")


def test_credentials_repr_hides_secrets(credentials):
    text = repr(credentials)
    assert "key-123" in text
    assert SECRET not in text
    assert "pass-phrase" not in text


def test_credentials_validate_rejects_missing_parts():
    with pytest.raises(SignatureInputError):
        Credentials(api_key="", api_secret=SECRET, passphrase="p").validate()
    with pytest.raises(SignatureInputError):
        Credentials(api_key="k", api_secret=SECRET, passphrase="").validate()
