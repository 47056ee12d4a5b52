"""Prometheus metrics and request middleware for the Form Echo Service."""

from __future__ import annotations

import time
from dataclasses import dataclass

from prometheus_client import CollectorRegistry, Counter, Histogram
from quart import Quart, Response, current_app, g, request

from services.form_echo_service.logging_utils import create_service_logger

logger = create_service_logger("form_echo.metrics")

METRICS_EXTENSION_KEY = "metrics"


@dataclass(frozen=True)
class FormEchoMetrics:
    """Metric instances registered against one CollectorRegistry."""

    http_requests_total: Counter
    http_request_duration_seconds: Histogram
    form_submissions_total: Counter


def create_metrics(registry: CollectorRegistry) -> FormEchoMetrics:
    """Create Prometheus metrics instances for the HTTP middleware and echo routes."""
    return FormEchoMetrics(
        http_requests_total=Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["method", "endpoint", "status_code"],
            registry=registry,
        ),
        http_request_duration_seconds=Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            registry=registry,
        ),
        form_submissions_total=Counter(
            "form_submissions_total",
            "Total form submissions echoed back",
            ["method"],
            registry=registry,
        ),
    )


def get_app_metrics() -> FormEchoMetrics | None:
    """Return the metrics stored on the current app, if startup has run."""
    extensions = getattr(current_app, "extensions", {})
    return extensions.get(METRICS_EXTENSION_KEY)


UNMATCHED_ENDPOINT = "<unmatched>"


def endpoint_label() -> str:
    """Route template of the current request, so static paths share one series."""
    rule = request.url_rule
    return rule.rule if rule is not None else UNMATCHED_ENDPOINT


def setup_metrics_middleware(app: Quart) -> None:
    """Record request count and duration for every request the app handles.

    Requests are labelled by route template (``/<path:filename>`` for every
    public file), keeping series bounded however many paths clients invent.
    The metrics instance must be stored in app.extensions["metrics"] by
    startup_setup.initialize_services; until then nothing is recorded.
    """

    @app.before_request
    async def start_request_timer() -> None:
        g.request_started_at = time.perf_counter()

    @app.after_request
    async def record_request_metrics(response: Response) -> Response:
        started_at = getattr(g, "request_started_at", None)
        metrics = get_app_metrics()
        if started_at is None or metrics is None:
            return response

        try:
            endpoint = endpoint_label()
            metrics.http_requests_total.labels(
                method=request.method,
                endpoint=endpoint,
                status_code=str(response.status_code),
            ).inc()
            metrics.http_request_duration_seconds.labels(
                method=request.method, endpoint=endpoint
            ).observe(time.perf_counter() - started_at)
        except Exception as e:
            logger.error("Error recording request metrics", error=str(e))

        return response
