"""Section and link extraction over a fetched page.

Two searches are supported:

* **Section search**: find the element whose text mentions an identifier
  (e.g. ``"Winter 2024"``) and test whether another string appears in it.
* **Div-scoped link search**: find a container by ``id`` and return the
  anchors inside it whose visible text contains a query.

The ``find_*`` / ``search_*`` helpers that take a URL wrap the pure,
soup-level functions with :func:`fetch_html` and collapse their typed results
into the plain values the JSON responses use.
"""

from __future__ import annotations

import logging
from typing import List

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from appfunctions.config import settings
from appfunctions.scraper.fetcher import fetch_html
from appfunctions.scraper.models import (
    HREF_MISSING,
    LinkRecord,
    LinkSearchResult,
    Outcome,
    SectionMatchPolicy,
    SectionSearchResult,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _parse(html: str) -> BeautifulSoup | None:
    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        logger.warning("Could not parse page: %s", exc)
        return None


def resolve_policy(policy: SectionMatchPolicy | str) -> SectionMatchPolicy:
    """Coerce a configured policy name, falling back to ``first`` when unknown."""
    if isinstance(policy, SectionMatchPolicy):
        return policy
    try:
        return SectionMatchPolicy(str(policy).strip().lower())
    except ValueError:
        logger.warning(
            "Unknown section match policy %r; using %r.", policy, SectionMatchPolicy.FIRST.value
        )
        return SectionMatchPolicy.FIRST


def _most_specific(matches: List[Tag]) -> List[Tag]:
    """Drop every match that has another match among its descendants."""
    matched_ids = {id(el) for el in matches}
    return [
        el
        for el in matches
        if not any(id(child) in matched_ids for child in el.find_all(True))
    ]


def _anchor_record(anchor: Tag) -> LinkRecord:
    href = anchor.get("href")
    return LinkRecord(
        text=anchor.get_text().strip(),
        href=href if isinstance(href, str) else HREF_MISSING,
    )


# ---------------------------------------------------------------------------
# Soup-level API
# ---------------------------------------------------------------------------

def locate_section(
    soup: BeautifulSoup,
    section_identifier: str,
    policy: SectionMatchPolicy | str = SectionMatchPolicy.FIRST,
) -> tuple[Outcome, Tag | None]:
    """Find the element that stands for *section_identifier*.

    Every element is scanned in document order and matched by a
    case-insensitive substring test on its full text.  Since an ancestor's
    text contains its children's, the outermost match (usually ``<html>``)
    comes first; *policy* decides which of the matches is the section.
    """
    policy = SectionMatchPolicy(policy)
    needle = section_identifier.lower()
    candidates = (el for el in soup.find_all(True) if needle in el.get_text().lower())

    if policy is SectionMatchPolicy.FIRST:
        first = next(candidates, None)
        if first is None:
            return Outcome.NOT_FOUND, None
        return Outcome.OK, first

    matches = list(candidates)
    if not matches:
        return Outcome.NOT_FOUND, None

    innermost = _most_specific(matches)
    if policy is SectionMatchPolicy.UNIQUE and len(innermost) > 1:
        logger.info(
            "Section %r is ambiguous: %d distinct elements match.",
            section_identifier,
            len(innermost),
        )
        return Outcome.AMBIGUOUS, None
    return Outcome.OK, innermost[0]


def filter_links(container: Tag, link_text_to_find: str) -> List[LinkRecord]:
    """Return the anchors under *container* whose trimmed text contains the query."""
    needle = link_text_to_find.lower()
    return [
        _anchor_record(anchor)
        for anchor in container.find_all("a")
        if needle in anchor.get_text().strip().lower()
    ]


def search_section_in_html(
    html: str,
    search_text: str,
    section_identifier: str,
    policy: SectionMatchPolicy | str = SectionMatchPolicy.FIRST,
) -> SectionSearchResult:
    soup = _parse(html)
    if soup is None:
        return SectionSearchResult(outcome=Outcome.PARSE_ERROR)

    outcome, section = locate_section(soup, section_identifier, policy)
    if section is None:
        if outcome is Outcome.NOT_FOUND:
            logger.info("Section %r not found on the page.", section_identifier)
        return SectionSearchResult(outcome=outcome)

    section_text = section.get_text()
    logger.info("Found section: %r. Extracting content for further search.", section_identifier)

    found = search_text.lower() in section_text.lower()
    if found:
        logger.info("Found %r within the %r section.", search_text, section_identifier)
    else:
        logger.info("%r not found within the %r section.", search_text, section_identifier)
    return SectionSearchResult(outcome=Outcome.OK, found=found, section_text=section_text)


def find_links_in_html(html: str, div_id: str, link_text_to_find: str) -> LinkSearchResult:
    soup = _parse(html)
    if soup is None:
        return LinkSearchResult(outcome=Outcome.PARSE_ERROR)

    container = soup.find(id=div_id)
    if container is None:
        logger.info("Div with ID %r not found on the page.", div_id)
        return LinkSearchResult(outcome=Outcome.NOT_FOUND)

    links = filter_links(container, link_text_to_find)
    if links:
        logger.info("Found %d matching <a> tags inside div %r.", len(links), div_id)
    else:
        logger.info(
            "No <a> tags with text containing %r found inside div %r.",
            link_text_to_find,
            div_id,
        )
    return LinkSearchResult(outcome=Outcome.OK, links=links)


# ---------------------------------------------------------------------------
# URL-level API
# ---------------------------------------------------------------------------

def search_section(
    url: str,
    search_text: str,
    section_identifier: str,
    policy: SectionMatchPolicy | str | None = None,
) -> SectionSearchResult:
    """Fetch *url* and run :func:`search_section_in_html` on the body.

    *policy* defaults to ``settings.section_match_policy``.
    """
    policy = resolve_policy(policy or settings.section_match_policy)
    page = fetch_html(url)
    if not page.ok:
        return SectionSearchResult(outcome=page.outcome)
    return search_section_in_html(
        page.html,
        search_text,
        section_identifier,
        policy,
    )


def search_text_in_website_html(
    url: str,
    search_text: str,
    section_identifier: str,
    policy: SectionMatchPolicy | str | None = None,
) -> bool:
    """Return ``True`` if *search_text* appears in the section, ``False`` otherwise
    or on any failure."""
    return search_section(url, search_text, section_identifier, policy).found


def find_links_in_div(url: str, div_id: str, link_text_to_find: str) -> LinkSearchResult:
    """Fetch *url* and run :func:`find_links_in_html` on the body."""
    page = fetch_html(url)
    if not page.ok:
        return LinkSearchResult(outcome=page.outcome)
    return find_links_in_html(page.html, div_id, link_text_to_find)


def find_specific_links_in_div(url: str, div_id: str, link_text_to_find: str) -> List[LinkRecord]:
    """Return the matching anchors in document order; empty on any failure."""
    return find_links_in_div(url, div_id, link_text_to_find).links
