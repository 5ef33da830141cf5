"""Scraper package: single-shot fetch and section / link extraction."""

from appfunctions.scraper.extractor import (
    find_links_in_div,
    find_specific_links_in_div,
    search_section,
    search_text_in_website_html,
)
from appfunctions.scraper.fetcher import fetch_html
from appfunctions.scraper.models import (
    FetchResult,
    LinkRecord,
    LinkSearchResult,
    Outcome,
    SectionMatchPolicy,
    SectionSearchResult,
)

__all__ = [
    "fetch_html",
    "find_links_in_div",
    "find_specific_links_in_div",
    "search_section",
    "search_text_in_website_html",
    "FetchResult",
    "LinkRecord",
    "LinkSearchResult",
    "Outcome",
    "SectionMatchPolicy",
    "SectionSearchResult",
]
