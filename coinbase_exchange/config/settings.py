from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.auth import Credentials
from ..core.client import API_TARGETS, DEFAULT_MAX_REDIRECTS, DEFAULT_TIMEOUT


class Settings(BaseSettings):
    """Client configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str | None = Field(None, alias="COINBASE_API_KEY")
    api_secret: SecretStr | None = Field(None, alias="COINBASE_API_SECRET")
    passphrase: SecretStr | None = Field(None, alias="COINBASE_PASSPHRASE")

    api_target: str = Field("exchange", alias="COINBASE_API_TARGET")
    sandbox: bool = Field(False, alias="COINBASE_SANDBOX")
    base_url: str | None = Field(None, alias="COINBASE_BASE_URL")
    timeout: float = Field(DEFAULT_TIMEOUT, alias="COINBASE_TIMEOUT", gt=0)
    max_redirects: int = Field(DEFAULT_MAX_REDIRECTS, alias="COINBASE_MAX_REDIRECTS", ge=0)
    escape_params: bool = Field(True, alias="COINBASE_ESCAPE_PARAMS")
    sign_query_string: bool = Field(False, alias="COINBASE_SIGN_QUERY_STRING")

    @field_validator("api_target")
    @classmethod
    def _known_target(cls, value: str) -> str:
        value = value.lower()
        if value not in API_TARGETS:
            raise ValueError(f"api_target must be one of {sorted(API_TARGETS)}")
        return value

    def credentials(self) -> Credentials | None:
        """Credentials for private calls, or ``None`` when any part is missing."""
        if not (self.api_key and self.api_secret and self.passphrase):
            return None
        return Credentials(
            api_key=self.api_key,
            api_secret=self.api_secret.get_secret_value(),
            passphrase=self.passphrase.get_secret_value(),
        )


def load_settings(env_path: str | Path | None = None) -> Settings:
    """Load settings from environment variables or a .env file.

    Args:
        env_path: Optional path to a .env file. If None, uses the default .env file.
    """
    if env_path:
        load_dotenv(dotenv_path=env_path)
    else:
        load_dotenv()
    return Settings()
