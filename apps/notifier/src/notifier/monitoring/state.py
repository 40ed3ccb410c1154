from __future__ import annotations

from notifier.metrics import InMemoryNotifierMetricsCollector
from notifier.prometheus_exporter import NotifierPrometheusExporter

notifier_metrics = InMemoryNotifierMetricsCollector()
notifier_exporter = NotifierPrometheusExporter()
