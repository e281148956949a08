"""Logging setup driven by AppSettings."""

from __future__ import annotations

import logging

from wpsif.core.config import AppSettings

LOG_FORMAT = "%(asctime)s %(levelname)s:%(name)s:%(message)s"


def configure_logging(settings: AppSettings | None = None) -> None:
    """Apply the configured log level to the root logger."""
    if settings is None:
        settings = AppSettings()
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
