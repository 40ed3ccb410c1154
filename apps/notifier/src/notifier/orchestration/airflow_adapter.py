from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import datetime
from typing import Any

from notifier.events.broadcaster import UpcomingEventBroadcaster

try:
    from airflow import DAG
    from airflow.operators.python import PythonOperator

    AIRFLOW_AVAILABLE = True
except ImportError:
    AIRFLOW_AVAILABLE = False
    DAG = Any  # type: ignore[misc,assignment]
    PythonOperator = Any  # type: ignore[misc,assignment]


def build_event_broadcast_callable(
    broadcaster_factory: Callable[[], UpcomingEventBroadcaster],
) -> Callable[[], int]:
    def _run() -> int:
        broadcaster = broadcaster_factory()
        summary = asyncio.run(broadcaster.run())
        if summary.failed:
            raise RuntimeError(f"event broadcast had failures: sent={summary.sent}, failed={summary.failed}")
        return summary.sent

    return _run


def create_event_broadcast_dag(
    dag_id: str,
    broadcaster_factory: Callable[[], UpcomingEventBroadcaster],
    schedule: str = "@daily",
    start_date: datetime | None = None,
) -> Any:
    if not AIRFLOW_AVAILABLE:
        raise RuntimeError("apache-airflow is not installed")

    dag = DAG(
        dag_id=dag_id,
        schedule=schedule,
        start_date=start_date or datetime(2026, 1, 1),
        catchup=False,
        tags=["notifier", "events"],
    )
    PythonOperator(
        task_id="broadcast_upcoming_events",
        python_callable=build_event_broadcast_callable(broadcaster_factory),
        dag=dag,
    )
    return dag
