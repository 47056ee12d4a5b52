"""
Form Echo Service Application.

This module implements the Form Echo Service HTTP API using the Quart
framework. The service serves static files from a public directory and echoes
submitted GET/POST form data back as an HTML fragment.
"""

from __future__ import annotations

from quart_dishka import QuartDishka

from services.form_echo_service import startup_setup
from services.form_echo_service.api.form_routes import form_bp
from services.form_echo_service.api.health_routes import health_bp
from services.form_echo_service.api.static_routes import static_bp
from services.form_echo_service.config import Settings
from services.form_echo_service.logging_utils import (
    configure_service_logging,
    create_service_logger,
    setup_request_log_context,
)
from services.form_echo_service.metrics import setup_metrics_middleware
from services.form_echo_service.quart_app import FormEchoApp

logger = create_service_logger("form_echo.app")


def create_app(settings: Settings | None = None) -> FormEchoApp:
    """Create and configure the Quart application.

    Args:
        settings: Optional settings override for testing

    Returns:
        Configured application with DI, metrics middleware and all routes
    """
    if settings is None:
        settings = Settings()

    configure_service_logging(settings)

    app = FormEchoApp(__name__)
    app.settings = settings
    app.public_dir = settings.resolved_public_dir()
    app.container = startup_setup.create_di_container(settings)

    QuartDishka(app=app, container=app.container)
    setup_request_log_context(app)
    setup_metrics_middleware(app)

    @app.before_serving
    async def startup() -> None:
        """Initialize services and announce the listening address."""
        try:
            await startup_setup.initialize_services(app)
            logger.info(f"Server is running on http://localhost:{settings.PORT}")
        except Exception as e:
            logger.critical(f"Failed to start Form Echo Service: {e}", exc_info=True)
            raise

    @app.after_serving
    async def shutdown() -> None:
        """Gracefully shutdown all services."""
        try:
            await startup_setup.shutdown_services(app)
            logger.info("Form Echo Service shutdown completed")
        except Exception as e:
            logger.error(f"Error during service shutdown: {e}", exc_info=True)

    # Named routes are registered before the catch-all static route
    app.register_blueprint(form_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(static_bp)

    return app


def run(settings: Settings | None = None) -> None:
    """Serve the application with Hypercorn until interrupted."""
    import asyncio

    import hypercorn.asyncio
    from hypercorn.config import Config

    if settings is None:
        settings = Settings()
    app = create_app(settings)

    config = Config()
    config.bind = [f"{settings.HOST}:{settings.PORT}"]
    config.workers = settings.WEB_CONCURRENCY
    config.worker_class = "asyncio"
    config.loglevel = settings.LOG_LEVEL.lower()
    config.graceful_timeout = settings.GRACEFUL_TIMEOUT
    config.keep_alive_timeout = settings.KEEP_ALIVE_TIMEOUT
    config.accesslog = "-"

    asyncio.run(hypercorn.asyncio.serve(app, config))


if __name__ == "__main__":
    run()
