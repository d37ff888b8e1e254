"""Query-string encoding for REST requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

# Characters kept literal when escaping: ISO timestamps and product ids stay readable.
_SAFE_CHARS = ":,-._~"


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _quote(text: str, escape: bool) -> str:
    return quote(text, safe=_SAFE_CHARS) if escape else text


def encode_params(params: Mapping[str, Any] | None, *, escape: bool = True) -> str:
    """Build ``?a=1&b=2`` from ``params`` preserving input order.

    ``None`` values are dropped, list/tuple values repeat the key once per
    element. Returns an empty string when nothing is left to encode.
    """

    if not params:
        return ""

    pairs: list[str] = []
    for name, value in params.items():
        if value is None:
            continue
        key = _quote(str(name), escape)
        values = value if isinstance(value, (list, tuple)) else (value,)
        for item in values:
            if item is None:
                continue
            pairs.append(f"{key}={_quote(_render(item), escape)}")

    return f"?{'&'.join(pairs)}" if pairs else ""


__all__ = ["encode_params"]
