"""Section Search: does some text appear inside the section a heading names?"""

from __future__ import annotations

from typing import Any

from appfunctions.config import SectionQuery, settings
from appfunctions.runtime import Payload, get_str, run_function, timestamp
from appfunctions.scraper.extractor import search_text_in_website_html

FOUND_MESSAGE = "Text found in the section."
NOT_FOUND_MESSAGE = "Text not found in the section."


def resolve_query(payload: Payload, defaults: SectionQuery) -> SectionQuery:
    return SectionQuery(
        url=get_str(payload, "url", defaults.url),
        section_identifier=get_str(payload, "sectionIdentifier", defaults.section_identifier),
        search_text=get_str(payload, "searchText", defaults.search_text),
    )


def handle(payload: Payload, defaults: SectionQuery | None = None) -> dict[str, Any]:
    query = resolve_query(payload, defaults or settings.section_query_defaults())
    found = search_text_in_website_html(query.url, query.search_text, query.section_identifier)

    return {
        "status": "success",
        "message": FOUND_MESSAGE if found else NOT_FOUND_MESSAGE,
        "query_parameters": {
            "url": query.url,
            "sectionIdentifier": query.section_identifier,
            "searchText": query.search_text,
        },
        "found": found,
        "timestamp": timestamp(),
    }


def main() -> int:
    return run_function(handle)


if __name__ == "__main__":
    raise SystemExit(main())
