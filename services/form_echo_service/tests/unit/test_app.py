"""Tests for application factory wiring."""

from __future__ import annotations

from pathlib import Path

import pytest

from services.form_echo_service.app import create_app
from services.form_echo_service.config import Settings
from services.form_echo_service.metrics import METRICS_EXTENSION_KEY, FormEchoMetrics
from services.form_echo_service.quart_app import FormEchoApp


def test_create_app_carries_settings(settings: Settings, public_dir: Path) -> None:
    app = create_app(settings)

    assert isinstance(app, FormEchoApp)
    assert app.settings is settings
    assert app.public_dir == public_dir.resolve()
    assert app.static_folder is None


@pytest.mark.parametrize(
    "blueprint_name",
    ["form_routes", "health_routes", "static_routes"],
)
def test_blueprints_registered(app: FormEchoApp, blueprint_name: str) -> None:
    assert blueprint_name in app.blueprints


def test_url_map_routes(app: FormEchoApp) -> None:
    rules = {rule.rule: rule.methods for rule in app.url_map.iter_rules()}

    assert "GET" in rules["/get-form"]
    assert "POST" in rules["/post-form"]
    assert "POST" not in rules["/get-form"]


async def test_serving_lifecycle_stores_metrics(app: FormEchoApp) -> None:
    async with app.test_app():
        assert isinstance(app.extensions[METRICS_EXTENSION_KEY], FormEchoMetrics)
