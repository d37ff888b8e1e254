"""Public market-data endpoints, including chunked historical candles."""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any

from ..core.ranges import MAX_CANDLES_PER_REQUEST, TimeRange
from ..core.responses import MalformedResponse, NormalizedResponse, Success
from ..core.timeutil import TimeLike, format_timestamp, to_datetime

LOGGER = logging.getLogger(__name__)

MINUTE_IN_SECONDS = 60
HOUR_IN_SECONDS = MINUTE_IN_SECONDS * 60
DAY_IN_SECONDS = HOUR_IN_SECONDS * 24

CANDLE_GRANULARITIES = frozenset({60, 300, 900, 3600, 21600, 86400})
DEFAULT_CANDLE_LOOKBACK = dt.timedelta(weeks=4)


class ProductsMixin:
    def list_products(self, **params: Any) -> NormalizedResponse:
        return self.request("GET", "products", params=params)

    def get_product(self, product_id: str) -> NormalizedResponse:
        return self.request("GET", f"products/{product_id}")

    def get_product_book(self, product_id: str, level: int | None = None) -> NormalizedResponse:
        return self.request("GET", f"products/{product_id}/book", params={"level": level})

    def get_product_trades(self, product_id: str, **params: Any) -> NormalizedResponse:
        return self.request("GET", f"products/{product_id}/trades", params=params)

    def get_product_stats(self, product_id: str) -> NormalizedResponse:
        """24 hour and 30 day stats. Volume is in base currency units."""
        return self.request("GET", f"products/{product_id}/stats")

    def get_product_ticker(self, product_id: str) -> NormalizedResponse:
        return self.request("GET", f"products/{product_id}/ticker")

    def get_product_candles(
        self,
        product_id: str,
        start: TimeLike | None = None,
        end: TimeLike | None = None,
        granularity: int = DAY_IN_SECONDS,
        *,
        max_points: int = MAX_CANDLES_PER_REQUEST,
    ) -> NormalizedResponse:
        """Historic rates as ``[time, low, high, open, close, volume]`` rows.

        The exchange rejects requests spanning more than 300 buckets, so the
        range is fetched window by window and merged oldest first. The first
        failed window is returned as the overall result.
        """

        if granularity not in CANDLE_GRANULARITIES:
            raise ValueError(
                f"Unsupported granularity {granularity}; expected one of {sorted(CANDLE_GRANULARITIES)}"
            )
        end_dt = to_datetime(end) if end is not None else to_datetime(self.clock())
        start_dt = to_datetime(start) if start is not None else end_dt - DEFAULT_CANDLE_LOOKBACK
        windows = TimeRange(start_dt, end_dt, granularity).chunks(max_points)

        rows_by_time: dict[Any, list[Any]] = {}
        for window in windows:
            result = self.request(
                "GET",
                f"products/{product_id}/candles",
                params={
                    "start": format_timestamp(window.start),
                    "end": format_timestamp(window.end),
                    "granularity": granularity,
                },
            )
            if not isinstance(result, Success):
                return result
            if not isinstance(result.value, list):
                return MalformedResponse(f"Unexpected candle payload: {result.value!r}")
            for row in result.value:
                if not isinstance(row, (list, tuple)) or not row:
                    return MalformedResponse(f"Unexpected candle row: {row!r}")
                rows_by_time[row[0]] = list(row)

        LOGGER.debug(
            "Fetched %d candles for %s in %d window(s)", len(rows_by_time), product_id, len(windows)
        )
        return Success([rows_by_time[key] for key in sorted(rows_by_time)])
