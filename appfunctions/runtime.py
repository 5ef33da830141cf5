"""Platform input/output conventions shared by every function.

The host starts one process per request.  The request body arrives either as
JSON in an environment variable (``APPWRITE_FUNCTION_DATA`` by default) or as
one line on stdin; the response is one line of JSON on stdout.  Diagnostics go
to stderr through :mod:`logging`.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, TextIO

from appfunctions.config import settings

logger = logging.getLogger(__name__)

Payload = dict[str, Any]
Handler = Callable[[Payload], dict[str, Any]]

INVALID_JSON_PAYLOAD: Payload = {"error": "Invalid JSON input"}


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def configure_logging(level: str | None = None) -> None:
    """Send log records to stderr; stdout is reserved for the response."""
    logging.basicConfig(
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    name = (level or settings.log_level).strip().upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        resolved = logging.INFO
        logger.warning("Unknown log level %r; using INFO.", name)
    logging.getLogger().setLevel(resolved)


# ---------------------------------------------------------------------------
# Payload ingestion
# ---------------------------------------------------------------------------

def parse_payload(raw: str | None) -> Payload:
    """Decode *raw* into a mapping.

    Empty input gives ``{}``.  Malformed JSON, or JSON that is not an object,
    gives :data:`INVALID_JSON_PAYLOAD` so that callers carry on with defaults.
    """
    if raw is None or not raw.strip():
        return {}
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.error("Error parsing input JSON: %s", exc)
        return dict(INVALID_JSON_PAYLOAD)
    if not isinstance(decoded, dict):
        logger.error("Error parsing input JSON: expected an object, got %s", type(decoded).__name__)
        return dict(INVALID_JSON_PAYLOAD)
    return decoded


def read_payload(
    environ: Mapping[str, str] | None = None,
    stdin: TextIO | None = None,
) -> Payload:
    """Read the request payload from the environment, else one line of stdin."""
    environ = os.environ if environ is None else environ
    stdin = sys.stdin if stdin is None else stdin

    raw = environ.get(settings.payload_env_var)
    if not raw:
        try:
            raw = stdin.readline()
        except (OSError, ValueError) as exc:
            logger.error("Error reading from stdin: %s", exc)
            raw = "{}"
    return parse_payload(raw)


def get_str(payload: Payload, key: str, default: str) -> str:
    value = payload.get(key)
    return value if isinstance(value, str) else default


def get_int(payload: Payload, key: str, default: int) -> int:
    value = payload.get(key)
    # bool is an int subclass; true/false is not a number here.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return default


# ---------------------------------------------------------------------------
# Response emission
# ---------------------------------------------------------------------------

def timestamp() -> str:
    """Current time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


def emit_response(response: Mapping[str, Any], stdout: TextIO | None = None) -> None:
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(json.dumps(response) + "\n")
    stdout.flush()


def run_function(
    handler: Handler,
    environ: Mapping[str, str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    payload: Payload | None = None,
    log_level: str | None = None,
) -> int:
    """Run one invocation of *handler* end to end and return the exit code.

    When *payload* is given it is used as-is instead of reading the platform
    input and *log_level* overrides ``settings.log_level``.  A handler that raises still produces a JSON line with
    ``status: "error"``.
    """
    configure_logging(log_level)
    if payload is None:
        payload = read_payload(environ, stdin)

    try:
        response = handler(payload)
    except Exception as exc:
        logger.exception("Function %s failed", getattr(handler, "__module__", handler))
        response = {
            "status": "error",
            "message": f"Unhandled error: {exc}",
            "timestamp": timestamp(),
        }

    emit_response(response, stdout)
    return 0
