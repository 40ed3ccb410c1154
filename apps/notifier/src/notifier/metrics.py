from __future__ import annotations

from collections import defaultdict

LOCATION_OUTCOMES = ("near", "far", "invalid", "missing_token", "ignored")


class InMemoryNotifierMetricsCollector:
    def __init__(self) -> None:
        self.location_checks_total: dict[str, int] = defaultdict(int)
        self.notifications_total: dict[tuple[str, str], int] = defaultdict(int)
        self.broadcast_runs_total: dict[str, int] = defaultdict(int)
        self.last_broadcast_duration_seconds: float | None = None

    def increment_location_check(self, outcome: str) -> None:
        if outcome not in LOCATION_OUTCOMES:
            raise ValueError(f"unknown location check outcome: {outcome}")
        self.location_checks_total[outcome] += 1

    def increment_notification(self, kind: str, success: bool) -> None:
        self.notifications_total[(kind, "success" if success else "failure")] += 1

    def increment_broadcast_run(self, status: str) -> None:
        self.broadcast_runs_total[status] += 1

    def observe_broadcast_duration(self, duration_seconds: float) -> None:
        self.last_broadcast_duration_seconds = duration_seconds

    def reset(self) -> None:
        self.location_checks_total.clear()
        self.notifications_total.clear()
        self.broadcast_runs_total.clear()
        self.last_broadcast_duration_seconds = None
