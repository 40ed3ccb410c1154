from __future__ import annotations

import threading

import uvicorn


def start_monitoring_thread(host: str, port: int) -> threading.Thread:
    """Serve the monitoring app next to a long-running worker."""
    config = uvicorn.Config("notifier.monitoring.app:app", host=host, port=port, reload=False)
    server = uvicorn.Server(config)
    thread = threading.Thread(target=server.run, name="notifier-monitoring", daemon=True)
    thread.start()
    return thread
