"""BigPost connection settings, read from the environment."""

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://app.bigpost.com.au"
DEFAULT_TIMEOUT = 15.0
DEFAULT_MAX_RETRIES = 2
DEFAULT_BACKOFF_BASE = 1.0
DEFAULT_RATE_LIMIT = 60
DEFAULT_RATE_WINDOW = 60.0

USER_AGENT = "Unwind-Designs/1.0"


def _first_env(*names: str) -> str | None:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


@dataclass(frozen=True)
class BigPostConfig:
    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    backoff_base: float = DEFAULT_BACKOFF_BASE
    rate_limit: int = DEFAULT_RATE_LIMIT
    rate_window: float = DEFAULT_RATE_WINDOW

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "BigPostConfig":
        return cls(
            api_key=_first_env("BIGPOST_API_KEY", "BIG_POST_API_KEY", "BIG_POST_API_TOKEN"),
            base_url=_first_env("BIGPOST_BASE_URL", "BIGPOST_API_URL") or DEFAULT_BASE_URL,
            timeout=float(os.environ.get("BIGPOST_TIMEOUT", DEFAULT_TIMEOUT)),
            max_retries=int(os.environ.get("BIGPOST_MAX_RETRIES", DEFAULT_MAX_RETRIES)),
        )
