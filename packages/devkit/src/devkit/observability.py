from __future__ import annotations

import logging
from typing import Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider

_configured = False
_logging_configured = False
_probe_filter_configured = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_RESERVED_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "color_message"}


class ContextFormatter(logging.Formatter):
    """Appends the ``extra={...}`` context of a record as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_RECORD_ATTRS and not key.startswith("_")
        }
        if not context:
            return line
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(context.items()))
        head, sep, tail = line.partition("\n")
        return f"{head} {rendered}{sep}{tail}"


class _ProbeAccessLogFilter(logging.Filter):
    def __init__(self, ignored_paths: tuple[str, ...]) -> None:
        super().__init__()
        self._ignored_paths = {self._normalize_path(path) for path in ignored_paths}

    @staticmethod
    def _normalize_path(path: str) -> str:
        base = path.split("?", 1)[0]
        if base != "/" and base.endswith("/"):
            return base[:-1]
        return base

    @classmethod
    def _extract_path_and_status(cls, record: logging.LogRecord) -> tuple[str | None, int | None]:
        args: Any = getattr(record, "args", ())
        if not isinstance(args, tuple) or len(args) < 5:
            return None, None
        path = args[2] if isinstance(args[2], str) else None
        try:
            status = int(args[4]) if args[4] is not None else None
        except (TypeError, ValueError):
            status = None
        return path, status

    def filter(self, record: logging.LogRecord) -> bool:
        path, status = self._extract_path_and_status(record)
        if path is None or status is None:
            return True
        return not (status == 200 and self._normalize_path(path) in self._ignored_paths)


def configure_otel(service_name: str) -> None:
    global _configured
    if _configured:
        return
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    trace.set_tracer_provider(provider)
    _configured = True


def configure_logging(level: str = "INFO") -> None:
    global _logging_configured
    if _logging_configured:
        return
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level}")
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter(LOG_FORMAT))
    logging.basicConfig(level=resolved, handlers=[handler])
    _logging_configured = True


def configure_probe_access_log_filter(ignored_paths: tuple[str, ...] = ("/healthz", "/readyz")) -> None:
    global _probe_filter_configured
    if _probe_filter_configured:
        return
    logging.getLogger("uvicorn.access").addFilter(_ProbeAccessLogFilter(ignored_paths=ignored_paths))
    _probe_filter_configured = True
