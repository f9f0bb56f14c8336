"""Logging setup shared by the API server and the CLI."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Initialize root logging.

    Args:
        level: Level name such as "DEBUG". Defaults to the LOG_LEVEL setting.
    """
    if level is None:
        from .settings import get_settings

        level = get_settings().log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)
