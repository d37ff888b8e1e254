"""Command line entry-point for quick API queries."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from .config import load_settings
from .core.errors import SignatureInputError
from .core.responses import NormalizedResponse, Success
from .exchange import CoinbaseExchange
from .resources.products import DAY_IN_SECONDS
from .utils.logging import configure_logging

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Query the Coinbase Exchange REST API")
    parser.add_argument("--env-file", help="Path to a .env file with credentials", default=None)
    parser.add_argument("--sandbox", action="store_true", help="Use the sandbox environment")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("accounts", help="List trading accounts (private)")
    commands.add_parser("products", help="List tradable products")

    ticker = commands.add_parser("ticker", help="Show the ticker for a product")
    ticker.add_argument("product_id")

    candles = commands.add_parser("candles", help="Fetch historic candles for a product")
    candles.add_argument("product_id")
    candles.add_argument("--start", help="ISO-8601 start (UTC), default 4 weeks before end")
    candles.add_argument("--end", help="ISO-8601 end (UTC), default now")
    candles.add_argument("--granularity", type=int, default=DAY_IN_SECONDS)
    return parser.parse_args(argv)


def run_command(exchange: CoinbaseExchange, args: argparse.Namespace) -> NormalizedResponse:
    if args.command == "accounts":
        return exchange.list_accounts()
    if args.command == "products":
        return exchange.list_products()
    if args.command == "ticker":
        return exchange.get_product_ticker(args.product_id)
    if args.command == "candles":
        return exchange.get_product_candles(
            args.product_id,
            start=args.start,
            end=args.end,
            granularity=args.granularity,
        )
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    try:
        settings = load_settings(args.env_file)
    except ValidationError as exc:
        print(f"Failed to load settings: {exc}", file=sys.stderr)
        return 1

    overrides = {"sandbox": True} if args.sandbox else {}
    with CoinbaseExchange.from_settings(settings, **overrides) as exchange:
        try:
            result = run_command(exchange, args)
        except (SignatureInputError, ValueError) as exc:
            print(f"Invalid request: {exc}", file=sys.stderr)
            return 1

    if not isinstance(result, Success):
        LOGGER.debug("Command %s failed: %r", args.command, result)
        print(f"{type(result).__name__}: {result.message}", file=sys.stderr)
        return 1

    print(json.dumps(result.value, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
