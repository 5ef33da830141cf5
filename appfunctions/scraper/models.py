"""Data models for the fetch / extract pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

HREF_MISSING = "N/A"


class Outcome(str, Enum):
    """Why a fetch or search ended the way it did.

    The JSON responses collapse every non-``OK`` value into ``false`` or an
    empty list; the distinction only shows up in logs and in Python callers.
    """

    OK = "ok"
    NOT_FOUND = "not_found"
    AMBIGUOUS = "ambiguous"
    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"
    PARSE_ERROR = "parse_error"


class SectionMatchPolicy(str, Enum):
    """How the section locator picks among elements whose text matches."""

    FIRST = "first"
    MOST_SPECIFIC = "most_specific"
    UNIQUE = "unique"


@dataclass
class FetchResult:
    """The outcome of a single GET."""

    url: str
    outcome: Outcome
    html: str = ""
    status_code: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK


@dataclass(frozen=True)
class LinkRecord:
    text: str
    href: str = HREF_MISSING

    def to_dict(self) -> dict[str, str]:
        return {"text": self.text, "href": self.href}


@dataclass
class SectionSearchResult:
    outcome: Outcome
    found: bool = False
    section_text: str = ""


@dataclass
class LinkSearchResult:
    outcome: Outcome
    links: List[LinkRecord] = field(default_factory=list)
