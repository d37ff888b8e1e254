from __future__ import annotations

import base64
from collections.abc import Callable
from typing import Any

SECRET = base64.b64encode(b"super-secret-key-bytes").decode()


class DummyResponse:
    def __init__(self, status_code: int = 200, text: str = "{}") -> None:
        self.status_code = status_code
        self.text = text


class DummySession:
    """Records every request and answers from a queue or a handler."""

    def __init__(self, *responses: Any, handler: Callable[..., Any] | None = None) -> None:
        self.responses = list(responses)
        self.handler = handler
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> DummyResponse:
        call = {"method": method, "url": url, **kwargs}
        self.calls.append(call)
        if self.handler is not None:
            outcome = self.handler(call)
        elif self.responses:
            outcome = self.responses.pop(0)
        else:
            outcome = DummyResponse()
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True


def make_settings(**overrides: Any):
    from coinbase_exchange.config import Settings

    values = {
        "COINBASE_API_KEY": "key",
        "COINBASE_API_SECRET": SECRET,
        "COINBASE_PASSPHRASE": "phrase",
    }
    values.update(overrides)
    return Settings.model_validate(values)
