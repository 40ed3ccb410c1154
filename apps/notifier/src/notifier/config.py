from __future__ import annotations

from pydantic import Field

from devkit.config import ServiceSettings


class NotifierSettings(ServiceSettings):
    SERVICE_NAME: str = "notifier"

    SITE_NAME: str = "Pyramids"
    SITE_LATITUDE: float = Field(default=29.9792, ge=-90, le=90)
    SITE_LONGITUDE: float = Field(default=31.1342, ge=-180, le=180)
    SITE_RADIUS_KM: float = Field(default=2.0, ge=0)
    NEARBY_NOTIFICATION_TITLE: str = "You’re Near the Pyramids!"
    NEARBY_NOTIFICATION_BODY: str = "Start your audio tour now."

    LOCATION_COLLECTION_GROUP: str = "location"
    LOCATION_DOCUMENT_ID: str = "current"
    EVENTS_COLLECTION: str = "events"
    EVENT_BROADCAST_TOPIC: str = "allUsers"
    EVENT_BROADCAST_MODE: str = "once"
    EVENT_BROADCAST_INTERVAL_SECONDS: float = Field(default=86_400.0, gt=0)

    PUSH_DRY_RUN: bool = False
    MONITORING_ENABLED: bool = True
    MONITORING_HOST: str = "0.0.0.0"
    MONITORING_PORT: int = 8001


def load_notifier_settings(service_name: str = "notifier") -> NotifierSettings:
    return NotifierSettings(SERVICE_NAME=service_name)
