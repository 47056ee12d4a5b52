"""Unit tests for the service's structured logging helpers."""

from __future__ import annotations

import pytest
from structlog.contextvars import bind_contextvars, clear_contextvars, get_contextvars

from services.form_echo_service.config import Settings
from services.form_echo_service.logging_utils import (
    _use_json_output,
    bind_request_context,
    service_context_processor,
)
from services.form_echo_service.quart_app import FormEchoApp


def test_service_context_processor_stamps_identity() -> None:
    processor = service_context_processor("form-echo-service", "staging")

    event_dict = processor(None, "info", {"event": "hello"})

    assert event_dict == {
        "event": "hello",
        "service.name": "form-echo-service",
        "deployment.environment": "staging",
    }


@pytest.mark.parametrize(
    "log_format, environment, expected",
    [
        ("", "development", False),
        ("", "production", True),
        ("json", "development", True),
        ("console", "production", False),
    ],
)
def test_json_output_selection(
    monkeypatch: pytest.MonkeyPatch, log_format: str, environment: str, expected: bool
) -> None:
    monkeypatch.setenv("LOG_FORMAT", log_format)

    assert _use_json_output(Settings(ENVIRONMENT=environment)) is expected


async def test_bind_request_context_replaces_previous_request(app: FormEchoApp) -> None:
    bind_contextvars(http_path="/stale", leftover="x")
    try:
        async with app.test_request_context("/get-form", method="GET"):
            await bind_request_context()

            assert get_contextvars() == {"http_method": "GET", "http_path": "/get-form"}
    finally:
        clear_contextvars()
