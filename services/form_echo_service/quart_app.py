"""
Typed Quart application class for the Form Echo Service.

Replaces setattr()/getattr() access to app-level infrastructure with
declared attributes, so route and middleware code can rely on them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from dishka import AsyncContainer
from quart import Quart

from services.form_echo_service.config import Settings


class FormEchoApp(Quart):
    """Quart application carrying the service's settings and DI container.

    GUARANTEED INFRASTRUCTURE (set in create_app):
        settings: Settings the app was built from
        container: Dishka async container for dependency injection
        public_dir: Absolute path of the static file directory
        extensions: Standard Quart extensions dictionary (metrics live here)
    """

    settings: Settings
    container: AsyncContainer
    public_dir: Path
    extensions: dict[str, Any]

    def __init__(self, import_name: str, *args: Any, **kwargs: Any) -> None:
        # Static files are served by the static blueprint, not Quart's built-in route
        kwargs.setdefault("static_folder", None)
        super().__init__(import_name, *args, **kwargs)
        self.extensions = {}
