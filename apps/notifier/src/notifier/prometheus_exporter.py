from __future__ import annotations

from prometheus_client import CollectorRegistry, Gauge, generate_latest

from notifier.metrics import InMemoryNotifierMetricsCollector


class NotifierPrometheusExporter:
    def __init__(self) -> None:
        self._registry = CollectorRegistry()
        self._location_checks = Gauge(
            "notifier_location_checks_total",
            "Location change checks grouped by outcome",
            labelnames=("outcome",),
            registry=self._registry,
        )
        self._notifications = Gauge(
            "notifier_notifications_total",
            "Push notifications grouped by kind and status",
            labelnames=("kind", "status"),
            registry=self._registry,
        )
        self._broadcast_runs = Gauge(
            "notifier_broadcast_runs_total",
            "Event broadcast runs grouped by status",
            labelnames=("status",),
            registry=self._registry,
        )
        self._broadcast_duration = Gauge(
            "notifier_broadcast_duration_seconds",
            "Duration of the latest event broadcast run",
            registry=self._registry,
        )

    def render(self, metrics: InMemoryNotifierMetricsCollector) -> str:
        for outcome, count in metrics.location_checks_total.items():
            self._location_checks.labels(outcome=outcome).set(count)
        for (kind, status), count in metrics.notifications_total.items():
            self._notifications.labels(kind=kind, status=status).set(count)
        for status, count in metrics.broadcast_runs_total.items():
            self._broadcast_runs.labels(status=status).set(count)
        if metrics.last_broadcast_duration_seconds is not None:
            self._broadcast_duration.set(metrics.last_broadcast_duration_seconds)
        return generate_latest(self._registry).decode("utf-8")
