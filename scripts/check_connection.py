#!/usr/bin/env python3
"""Simple connectivity check using the private accounts endpoint."""

from __future__ import annotations

import json
import sys

from pydantic import ValidationError

from coinbase_exchange import CoinbaseAPIError, CoinbaseExchange, CoinbaseError, load_settings
from coinbase_exchange.utils.logging import configure_logging


def main() -> int:
    configure_logging()
    try:
        settings = load_settings()
    except ValidationError as exc:
        print(f"Failed to load settings: {exc}", file=sys.stderr)
        return 1

    with CoinbaseExchange.from_settings(settings) as exchange:
        try:
            accounts = exchange.list_accounts().unwrap()
        except CoinbaseAPIError as exc:
            print(f"Coinbase API error ({exc.status_code}): {exc}", file=sys.stderr)
            return 1
        except CoinbaseError as exc:
            print(f"Request failed: {exc}", file=sys.stderr)
            return 1

    print(json.dumps(accounts, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
