"""Functions CLI: run any function locally the way the platform runs it.

Usage:
    python cli/main.py --help

Without ``--data`` each command reads its payload exactly like the deployed
function (``APPWRITE_FUNCTION_DATA``, else one line of stdin) and prints the
JSON response on stdout.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from appfunctions.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from appfunctions.handlers import greeter, link_finder, section_search
from appfunctions.runtime import Handler, parse_payload, run_function

app = typer.Typer(
    name="appfunctions",
    help="Run the serverless functions locally.",
    no_args_is_help=True,
)

_DATA_HELP = "JSON payload. Defaults to the platform input (env var, else stdin)."


def _run(handler: Handler, data: Optional[str], verbose: bool) -> None:
    payload = parse_payload(data) if data is not None else None
    code = run_function(handler, payload=payload, log_level="DEBUG" if verbose else None)
    if code:
        raise typer.Exit(code)


@app.command("greet")
def greet(
    data: Optional[str] = typer.Option(None, "--data", help=_DATA_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Run the Greeter function."""
    _run(greeter.handle, data, verbose)


@app.command("find-links")
def find_links(
    data: Optional[str] = typer.Option(None, "--data", help=_DATA_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Run the Link Finder function (fields: url, divId, linkText)."""
    _run(link_finder.handle, data, verbose)


@app.command("search-section")
def search_section(
    data: Optional[str] = typer.Option(None, "--data", help=_DATA_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Run the Section Search function (fields: url, sectionIdentifier, searchText)."""
    _run(section_search.handle, data, verbose)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
