"""Greeter: a template function showing the input/output conventions."""

from __future__ import annotations

from typing import Any

from appfunctions.runtime import Payload, get_int, get_str, run_function, timestamp

DEFAULT_NAME = "World"
DEFAULT_NUMBER = 0


def handle(payload: Payload) -> dict[str, Any]:
    name = get_str(payload, "name", DEFAULT_NAME)
    number = get_int(payload, "number", DEFAULT_NUMBER)
    doubled = number * 2

    return {
        "message": f"Hello, {name}! You provided the number: {doubled}.",
        "originalName": name,
        "processedNumber": doubled,
        "timestamp": timestamp(),
        "status": "success",
    }


def main() -> int:
    return run_function(handle)


if __name__ == "__main__":
    raise SystemExit(main())
