from __future__ import annotations

import json
import logging
import os
from typing import Any

import firebase_admin
from firebase_admin import credentials

from devkit.config import ServiceSettings

logger = logging.getLogger(__name__)


def resolve_credential(settings: ServiceSettings) -> credentials.Base | None:
    """Pick the service account credential, or ``None`` for application default credentials."""
    if settings.FIREBASE_CREDENTIALS_JSON:
        try:
            service_account_info = json.loads(settings.FIREBASE_CREDENTIALS_JSON)
        except json.JSONDecodeError as exc:
            raise RuntimeError("FIREBASE_CREDENTIALS_JSON is not valid json") from exc
        return credentials.Certificate(service_account_info)
    if settings.FIREBASE_CREDENTIALS_PATH:
        if not os.path.exists(settings.FIREBASE_CREDENTIALS_PATH):
            raise RuntimeError(f"firebase credentials file not found: {settings.FIREBASE_CREDENTIALS_PATH}")
        return credentials.Certificate(settings.FIREBASE_CREDENTIALS_PATH)
    return None


def initialize_firebase_app(settings: ServiceSettings) -> firebase_admin.App:
    """Return the named Firebase app for this service, creating it on first use.

    The app is passed explicitly to every client built from it; nothing here
    touches the SDK's default app.
    """
    try:
        return firebase_admin.get_app(settings.SERVICE_NAME)
    except ValueError:
        pass
    options: dict[str, Any] = {}
    if settings.FIREBASE_PROJECT_ID:
        options["projectId"] = settings.FIREBASE_PROJECT_ID
    credential = resolve_credential(settings)
    app = firebase_admin.initialize_app(credential, options or None, name=settings.SERVICE_NAME)
    logger.info(
        "firebase_app_initialized",
        extra={
            "service": settings.SERVICE_NAME,
            "credential_source": _credential_source(settings),
        },
    )
    return app


def _credential_source(settings: ServiceSettings) -> str:
    if settings.FIREBASE_CREDENTIALS_JSON:
        return "env_json"
    if settings.FIREBASE_CREDENTIALS_PATH:
        return "file"
    return "application_default"
