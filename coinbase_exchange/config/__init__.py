"""Configuration utilities for the Coinbase Exchange client."""

from .settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
