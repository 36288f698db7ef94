from __future__ import annotations

import logging
from typing import Optional

from .config import ClientSettings


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Initialize root logging once and return the package logger.

    Level comes from the argument or FEEDSERVER_LOG_LEVEL (default INFO).
    """
    lvl = (level or ClientSettings.from_env().log_level).upper()
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=getattr(logging, lvl, logging.INFO),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger().setLevel(getattr(logging, lvl, logging.INFO))
    return logging.getLogger("feedserver_client")
