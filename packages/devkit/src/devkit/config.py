from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    SERVICE_NAME: str = "service"
    LOG_LEVEL: str = "INFO"
    FIREBASE_PROJECT_ID: str | None = None
    FIREBASE_CREDENTIALS_JSON: str | None = None
    FIREBASE_CREDENTIALS_PATH: str | None = None


def load_settings(service_name: str) -> ServiceSettings:
    return ServiceSettings(SERVICE_NAME=service_name)
