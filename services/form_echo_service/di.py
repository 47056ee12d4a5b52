"""
Form Echo Service dependency injection configuration.
"""

from __future__ import annotations

from dishka import Provider, Scope, provide
from prometheus_client import CollectorRegistry

from services.form_echo_service.config import Settings
from services.form_echo_service.metrics import FormEchoMetrics, create_metrics


class FormEchoServiceProvider(Provider):
    """DI provider for Form Echo Service dependencies."""

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self._settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide service settings."""
        return self._settings

    @provide(scope=Scope.APP)
    def provide_collector_registry(self) -> CollectorRegistry:
        """Provide a Prometheus registry private to this app instance."""
        return CollectorRegistry()

    @provide(scope=Scope.APP)
    def provide_metrics(self, registry: CollectorRegistry) -> FormEchoMetrics:
        """Provide the service's metric instances."""
        return create_metrics(registry)
