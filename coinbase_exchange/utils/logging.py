"""Logging setup shared by the CLI and scripts."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # urllib3 logs full request lines at DEBUG; keep it quieter than our own output.
    logging.getLogger("urllib3").setLevel(logging.INFO if verbose else logging.WARNING)


__all__ = ["LOG_FORMAT", "configure_logging"]
