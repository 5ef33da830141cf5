"""Link Finder: anchors inside a container ``<div>`` whose text matches a query."""

from __future__ import annotations

from typing import Any

from appfunctions.config import LinkQuery, settings
from appfunctions.runtime import Payload, get_str, run_function, timestamp
from appfunctions.scraper.extractor import find_specific_links_in_div

FOUND_MESSAGE = "Found links matching the criteria."
NOT_FOUND_MESSAGE = "No links found matching the criteria."


def resolve_query(payload: Payload, defaults: LinkQuery) -> LinkQuery:
    """Overlay the payload's ``url`` / ``divId`` / ``linkText`` on *defaults*."""
    return LinkQuery(
        url=get_str(payload, "url", defaults.url),
        div_id=get_str(payload, "divId", defaults.div_id),
        link_text=get_str(payload, "linkText", defaults.link_text),
    )


def handle(payload: Payload, defaults: LinkQuery | None = None) -> dict[str, Any]:
    """Build the Link Finder response for *payload*.

    Failed fetches, a missing container and no matching anchors all come back
    as an empty ``found_links`` list with ``status: "success"``.
    """
    query = resolve_query(payload, defaults or settings.link_query_defaults())
    links = find_specific_links_in_div(query.url, query.div_id, query.link_text)

    return {
        "status": "success",
        "message": FOUND_MESSAGE if links else NOT_FOUND_MESSAGE,
        "query_parameters": {
            "url": query.url,
            "divId": query.div_id,
            "linkText": query.link_text,
        },
        "found_links": [link.to_dict() for link in links],
        "timestamp": timestamp(),
    }


def main() -> int:
    return run_function(handle)


if __name__ == "__main__":
    raise SystemExit(main())
