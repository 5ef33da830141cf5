"""Tests for the Greeter function."""

from __future__ import annotations

import io
import json
from datetime import datetime

import pytest

from appfunctions.config import settings
from appfunctions.handlers import greeter
from appfunctions.runtime import run_function


@pytest.mark.parametrize("name, number", [("John Doe", 100), ("Ada", 0), ("Zed", -21)])
def test_doubles_number_and_echoes_name(name, number) -> None:
    response = greeter.handle({"name": name, "number": number})

    assert response["originalName"] == name
    assert response["processedNumber"] == 2 * number
    assert response["message"] == f"Hello, {name}! You provided the number: {2 * number}."
    assert response["status"] == "success"


def test_empty_payload_uses_defaults() -> None:
    response = greeter.handle({})

    assert response["originalName"] == "World"
    assert response["processedNumber"] == 0
    assert response["message"] == "Hello, World! You provided the number: 0."


def test_wrong_types_fall_back_to_defaults() -> None:
    response = greeter.handle({"name": ["x"], "number": "12"})
    assert response["originalName"] == "World"
    assert response["processedNumber"] == 0


def test_timestamp_is_iso8601() -> None:
    response = greeter.handle({})
    datetime.fromisoformat(response["timestamp"])


def test_response_keys() -> None:
    assert set(greeter.handle({})) == {
        "message",
        "originalName",
        "processedNumber",
        "timestamp",
        "status",
    }


def test_malformed_input_still_prints_json() -> None:
    out = io.StringIO()
    run_function(
        greeter.handle,
        environ={settings.payload_env_var: "{definitely not json"},
        stdout=out,
    )
    response = json.loads(out.getvalue())
    assert response["status"] == "success"
    assert response["originalName"] == "World"


def test_reads_stdin_when_env_missing() -> None:
    out = io.StringIO()
    run_function(
        greeter.handle,
        environ={},
        stdin=io.StringIO('{"name": "John Doe", "number": 100}\n'),
        stdout=out,
    )
    response = json.loads(out.getvalue())
    assert response["message"] == "Hello, John Doe! You provided the number: 200."
