"""Startup and shutdown logic for the Form Echo Service."""

from __future__ import annotations

from dishka import AsyncContainer, make_async_container

from services.form_echo_service.config import Settings
from services.form_echo_service.di import FormEchoServiceProvider
from services.form_echo_service.logging_utils import create_service_logger
from services.form_echo_service.metrics import METRICS_EXTENSION_KEY, FormEchoMetrics
from services.form_echo_service.quart_app import FormEchoApp


def create_di_container(settings: Settings) -> AsyncContainer:
    """Creates and returns the DI AsyncContainer."""
    logger = create_service_logger("form_echo.startup")
    container = make_async_container(FormEchoServiceProvider(settings))
    logger.info("DI AsyncContainer created.")
    return container


async def initialize_services(app: FormEchoApp) -> None:
    """Resolve app-scoped metrics from the container and store them on the app."""
    logger = create_service_logger("form_echo.startup")

    try:
        metrics = await app.container.get(FormEchoMetrics)
        app.extensions[METRICS_EXTENSION_KEY] = metrics
        logger.info("Form Echo Service metrics initialized successfully.")
    except Exception as e:
        logger.critical(f"Failed to initialize Form Echo Service: {e}", exc_info=True)
        raise

    if not app.public_dir.is_dir():
        logger.warning(
            "Public directory does not exist, static files will not be served",
            public_dir=str(app.public_dir),
        )


async def shutdown_services(app: FormEchoApp) -> None:
    """Gracefully shutdown the Form Echo Service's DI container."""
    logger = create_service_logger("form_echo.startup")

    try:
        await app.container.close()
        logger.info("Form Echo Service DI container closed")
    except Exception as e:
        logger.error(f"Error during Form Echo Service shutdown: {e}", exc_info=True)
