"""Health and metrics routes for the Form Echo Service."""

from __future__ import annotations

from dishka import FromDishka
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest
from quart import Blueprint, Response, jsonify
from quart_dishka import inject

from services.form_echo_service.config import Settings
from services.form_echo_service.logging_utils import create_service_logger

logger = create_service_logger("form_echo.api.health")
health_bp = Blueprint("health_routes", __name__)


@health_bp.route("/healthz")
@inject
async def health_check(settings: FromDishka[Settings]) -> tuple[Response, int]:
    """Standardized health check endpoint."""
    public_dir = settings.resolved_public_dir()
    public_dir_available = public_dir.is_dir()
    if not public_dir_available:
        logger.warning("Public directory not accessible", public_dir=str(public_dir))

    # Echo routes work without the public directory, so the service stays healthy
    health_response = {
        "service": settings.SERVICE_NAME,
        "status": "healthy",
        "message": "Form Echo Service is healthy",
        "version": settings.SERVICE_VERSION,
        "checks": {
            "service_responsive": True,
            "public_directory_available": public_dir_available,
        },
        "environment": settings.ENVIRONMENT,
    }
    return jsonify(health_response), 200


@health_bp.route("/metrics")
@inject
async def metrics(registry: FromDishka[CollectorRegistry]) -> Response:
    """Prometheus metrics endpoint."""
    try:
        metrics_data = generate_latest(registry)
        return Response(metrics_data, content_type=CONTENT_TYPE_LATEST)
    except Exception as e:
        logger.error(f"Error generating metrics: {e}", exc_info=True)
        return Response("Error generating metrics", status=500)
