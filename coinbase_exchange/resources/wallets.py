"""Coinbase wallet endpoints."""

from __future__ import annotations

from ..core.responses import NormalizedResponse


class WalletsMixin:
    def list_wallets(self) -> NormalizedResponse:
        return self.request("GET", "coinbase-accounts", public=False)

    def generate_crypto_address(self, account_id: str) -> NormalizedResponse:
        """Create a one-time deposit address for a wallet account."""
        return self.request("POST", f"coinbase-accounts/{account_id}/addresses", public=False, body={})
