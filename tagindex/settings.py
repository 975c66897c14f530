# tagindex/settings.py
# Centralized configuration for parsing, fetching and logging.

from __future__ import annotations

import os
from functools import lru_cache

from bs4 import BeautifulSoup, FeatureNotFound

from .errors import ParseError

__version__ = "0.1.0"

_TRUTHY = ("1", "true", "yes", "on")


class Settings:
    """
    All configuration is read from environment variables (TAGINDEX_*).
    Values are read when the object is created; use get_settings() for the shared instance.
    """

    def __init__(self) -> None:
        # --- Parsing ---
        # Any bs4 tree builder: "html.parser" (stdlib), "lxml", "html5lib".
        self.PARSER: str = os.getenv("TAGINDEX_PARSER", "html.parser")

        # --- Fetching (index_url) ---
        self.HTTP_TIMEOUT: float = float(os.getenv("TAGINDEX_HTTP_TIMEOUT", "30"))
        self.USER_AGENT: str = os.getenv("TAGINDEX_USER_AGENT", f"tagindex/{__version__}")
        self.FOLLOW_REDIRECTS: bool = os.getenv("TAGINDEX_FOLLOW_REDIRECTS", "true").lower() in _TRUTHY

        # --- Logging (applied by the CLI only) ---
        self.LOG_LEVEL: str = os.getenv("TAGINDEX_LOG_LEVEL", "WARNING").upper()

    def require_parser(self, parser: str | None = None) -> None:
        """
        Raise a clear error if the tree builder (`parser`, else the configured one) is not installed.
        Call this early if you want to fail before reading any input.
        """
        parser = parser or self.PARSER
        try:
            BeautifulSoup("", parser)
        except FeatureNotFound as exc:
            raise ParseError(f"Parser '{parser}' is not available: install it or set TAGINDEX_PARSER",
                             parser=parser) from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Cached accessor for settings.
    Usage:
        from tagindex.settings import get_settings
        st = get_settings()
        st.require_parser()  # optional strict check
    """
    return Settings()
