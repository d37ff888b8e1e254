"""Profile endpoints."""

from __future__ import annotations

from ..core.responses import NormalizedResponse


class ProfilesMixin:
    def list_profiles(self, active: bool | None = None) -> NormalizedResponse:
        return self.request("GET", "profiles", public=False, params={"active": active})

    def get_profile(self, profile_id: str) -> NormalizedResponse:
        return self.request("GET", f"profiles/{profile_id}", public=False)

    def create_profile(self, name: str) -> NormalizedResponse:
        return self.request("POST", "profiles", public=False, body={"name": name})
