"""Function entry points.  Each module exposes ``handle(payload)`` and ``main()``."""

from appfunctions.handlers import greeter, link_finder, section_search

__all__ = ["greeter", "link_finder", "section_search"]
