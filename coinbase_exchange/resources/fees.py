"""Fee rate endpoint."""

from __future__ import annotations

from ..core.responses import NormalizedResponse


class FeesMixin:
    def get_fees(self) -> NormalizedResponse:
        """Current maker/taker fee rates and 30-day trailing volume."""
        return self.request("GET", "fees", public=False)
