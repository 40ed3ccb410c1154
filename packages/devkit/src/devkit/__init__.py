"""Common runtime devkit for configuration, Firebase and observability concerns."""

from devkit.config import ServiceSettings, load_settings
from devkit.firebase import initialize_firebase_app, resolve_credential
from devkit.observability import configure_logging, configure_otel, configure_probe_access_log_filter

__all__ = [
    "ServiceSettings",
    "configure_logging",
    "configure_otel",
    "configure_probe_access_log_filter",
    "initialize_firebase_app",
    "load_settings",
    "resolve_credential",
]
