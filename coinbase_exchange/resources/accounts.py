"""Trading account endpoints."""

from __future__ import annotations

from typing import Any

from ..core.responses import NormalizedResponse


class AccountsMixin:
    def list_accounts(self) -> NormalizedResponse:
        """All trading accounts (and balances) for the API key's profile."""
        return self.request("GET", "accounts", public=False)

    def get_account(self, account_id: str) -> NormalizedResponse:
        return self.request("GET", f"accounts/{account_id}", public=False)

    def get_account_holds(self, account_id: str, **params: Any) -> NormalizedResponse:
        """Holds placed on an account for open orders or withdrawals.

        Accepts the paging parameters ``before``, ``after`` and ``limit``.
        """
        return self.request("GET", f"accounts/{account_id}/holds", public=False, params=params)

    def get_account_ledger(self, account_id: str, **params: Any) -> NormalizedResponse:
        return self.request("GET", f"accounts/{account_id}/ledger", public=False, params=params)

    def get_account_transfers(self, account_id: str, **params: Any) -> NormalizedResponse:
        return self.request("GET", f"accounts/{account_id}/transfers", public=False, params=params)
