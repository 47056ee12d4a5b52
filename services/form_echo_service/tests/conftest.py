"""Shared fixtures for Form Echo Service tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from quart.typing import TestClientProtocol as QuartTestClient

from services.form_echo_service.app import create_app
from services.form_echo_service.config import Settings
from services.form_echo_service.quart_app import FormEchoApp
from services.form_echo_service.tests.public_files import (
    DOCS_INDEX_HTML,
    INDEX_HTML,
    LOGO_BYTES,
    STYLE_CSS,
)


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """Create a public directory with a small, known set of files."""
    root = tmp_path / "public"
    (root / "css").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "index.html").write_bytes(INDEX_HTML)
    (root / "css" / "style.css").write_bytes(STYLE_CSS)
    (root / "logo.bin").write_bytes(LOGO_BYTES)
    (root / "docs" / "index.html").write_bytes(DOCS_INDEX_HTML)
    (root / ".env").write_text("SECRET=1")
    (root / ".git").mkdir()
    (root / ".git" / "config").write_text("[core]")
    (tmp_path / "secret.txt").write_text("outside the public directory")
    return root


@pytest.fixture
def settings(public_dir: Path) -> Settings:
    """Settings pointing at the temporary public directory."""
    return Settings(PUBLIC_DIR=public_dir, ENVIRONMENT="testing", LOG_LEVEL="DEBUG")


@pytest.fixture
def app(settings: Settings) -> FormEchoApp:
    return create_app(settings)


@pytest.fixture
async def client(app: FormEchoApp) -> AsyncGenerator[QuartTestClient, None]:
    async with app.test_client() as test_client:
        yield test_client
