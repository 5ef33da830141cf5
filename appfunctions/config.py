"""Centralised settings for the serverless functions.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

logger = logging.getLogger(__name__)


def _optional_float(name: str) -> float | None:
    value = os.environ.get(name, "").strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number.", name, value)
        return None


@dataclass(frozen=True)
class LinkQuery:
    """The three query parameters of the Link Finder function."""

    url: str
    div_id: str
    link_text: str


@dataclass(frozen=True)
class SectionQuery:
    """The query parameters of the Section Search function."""

    url: str
    section_identifier: str
    search_text: str


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Platform input
    # ------------------------------------------------------------------
    payload_env_var: str = field(
        default_factory=lambda: os.environ.get("PAYLOAD_ENV_VAR", "APPWRITE_FUNCTION_DATA")
    )

    # ------------------------------------------------------------------
    # Query defaults
    # ------------------------------------------------------------------
    default_url: str = field(
        default_factory=lambda: os.environ.get(
            "DEFAULT_TARGET_URL", "https://gug.digitaluniversity.ac/results"
        )
    )
    default_div_id: str = field(
        default_factory=lambda: os.environ.get("DEFAULT_DIV_ID", "v-pills-all-2")
    )
    default_link_text: str = field(
        default_factory=lambda: os.environ.get("DEFAULT_LINK_TEXT", "M.Tech")
    )
    default_section_identifier: str = field(
        default_factory=lambda: os.environ.get("DEFAULT_SECTION_IDENTIFIER", "Winter 2024")
    )
    default_search_text: str = field(
        default_factory=lambda: os.environ.get("DEFAULT_SEARCH_TEXT", "Electrical Power System")
    )

    # ------------------------------------------------------------------
    # Scraper
    # ------------------------------------------------------------------
    # One of: first | most_specific | unique
    section_match_policy: str = field(
        default_factory=lambda: os.environ.get("SECTION_MATCH_POLICY", "first")
    )
    # None keeps the httpx client default.
    request_timeout: float | None = field(
        default_factory=lambda: _optional_float("REQUEST_TIMEOUT")
    )

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )

    def link_query_defaults(self) -> LinkQuery:
        """Return the Link Finder defaults as a :class:`LinkQuery`."""
        return LinkQuery(
            url=self.default_url,
            div_id=self.default_div_id,
            link_text=self.default_link_text,
        )

    def section_query_defaults(self) -> SectionQuery:
        """Return the Section Search defaults as a :class:`SectionQuery`."""
        return SectionQuery(
            url=self.default_url,
            section_identifier=self.default_section_identifier,
            search_text=self.default_search_text,
        )


# Module-level singleton: import this everywhere:
#   from appfunctions.config import settings
settings = Settings()
