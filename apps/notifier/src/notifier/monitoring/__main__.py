from __future__ import annotations

import uvicorn

from notifier.config import load_notifier_settings


def main() -> None:
    settings = load_notifier_settings()
    uvicorn.run(
        "notifier.monitoring.app:app",
        host=settings.MONITORING_HOST,
        port=settings.MONITORING_PORT,
        reload=False,
    )


if __name__ == "__main__":
    main()
