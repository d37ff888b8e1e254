"""User endpoints."""

from __future__ import annotations

from ..core.responses import NormalizedResponse


class UsersMixin:
    def get_exchange_limits(self, user_id: str) -> NormalizedResponse:
        return self.request("GET", f"users/{user_id}/exchange-limits", public=False)

    def get_server_time(self) -> NormalizedResponse:
        return self.request("GET", "time")
