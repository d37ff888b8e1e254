"""Order and fill endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.responses import NormalizedResponse

DEFAULT_ORDER_LIMIT = 100


class OrdersMixin:
    def list_orders(self, **params: Any) -> NormalizedResponse:
        """Open and un-settled orders.

        ``status`` may be a list and is sent as a repeated query key. Defaults
        to ``limit=100`` and ``status=["all"]``.
        """
        params.setdefault("limit", DEFAULT_ORDER_LIMIT)
        params.setdefault("status", ["all"])
        return self.request("GET", "orders", public=False, params=params)

    def get_order(
        self,
        order_id: str | None = None,
        *,
        client_oid: str | None = None,
        **params: Any,
    ) -> NormalizedResponse:
        if (order_id is None) == (client_oid is None):
            raise ValueError("Pass exactly one of order_id or client_oid")
        endpoint = f"orders/{order_id}" if order_id else f"orders/client:{client_oid}"
        return self.request("GET", endpoint, public=False, params=params)

    def create_order(self, order: Mapping[str, Any]) -> NormalizedResponse:
        """Submit an order. ``order`` is sent unchanged as the JSON body."""
        return self.request("POST", "orders", public=False, body=dict(order))

    def cancel_order(self, order_id: str, product_id: str | None = None) -> NormalizedResponse:
        return self.request(
            "DELETE",
            f"orders/{order_id}",
            public=False,
            params={"product_id": product_id},
        )

    def cancel_all_orders(
        self,
        product_id: str | None = None,
        profile_id: str | None = None,
    ) -> NormalizedResponse:
        return self.request(
            "DELETE",
            "orders",
            public=False,
            params={"product_id": product_id, "profile_id": profile_id},
        )

    def list_fills(
        self,
        order_id: str | None = None,
        product_id: str | None = None,
        **params: Any,
    ) -> NormalizedResponse:
        if order_id is None and product_id is None:
            raise ValueError("list_fills requires order_id or product_id")
        query = {"order_id": order_id, "product_id": product_id, **params}
        return self.request("GET", "fills", public=False, params=query)
