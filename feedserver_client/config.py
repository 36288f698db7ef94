from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ClientSettings:
    timeout_sec: float = 15.0
    user_agent: str = "feedserver-client/0.1"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "ClientSettings":
        """
        Build settings from FEEDSERVER_* environment variables.

        Values from a .env file (dotenv_path, or the nearest .env above the
        working directory) are loaded first; variables already set in the
        process environment win.
        """
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        defaults = cls()

        raw_timeout = os.getenv("FEEDSERVER_TIMEOUT_SEC")
        timeout = defaults.timeout_sec
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ConfigurationError(f"FEEDSERVER_TIMEOUT_SEC is not a number: {raw_timeout!r}") from e
            if timeout <= 0:
                raise ConfigurationError(f"FEEDSERVER_TIMEOUT_SEC must be positive: {raw_timeout!r}")

        return cls(
            timeout_sec=timeout,
            user_agent=os.getenv("FEEDSERVER_USER_AGENT") or defaults.user_agent,
            log_level=(os.getenv("FEEDSERVER_LOG_LEVEL") or defaults.log_level).upper(),
        )
