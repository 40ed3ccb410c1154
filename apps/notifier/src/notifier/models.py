from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from proximity import GeoPoint, validate_threshold_km

from notifier.errors import InvalidDeliveryTarget


@dataclass(frozen=True)
class ProximitySite:
    name: str
    location: GeoPoint
    radius_km: float

    def __post_init__(self) -> None:
        validate_threshold_km(self.radius_km)


@dataclass(frozen=True)
class LocationUpdate:
    location: GeoPoint
    token: str | None


@dataclass(frozen=True)
class UpcomingEvent:
    event_id: str
    name: str
    description: str | None
    date: datetime


@dataclass(frozen=True)
class PushNotification:
    title: str
    body: str | None
    token: str | None = None
    topic: str | None = None

    def __post_init__(self) -> None:
        has_token = bool(self.token and self.token.strip())
        has_topic = bool(self.topic and self.topic.strip())
        if self.token is not None and not has_token:
            raise InvalidDeliveryTarget("token must not be blank")
        if self.topic is not None and not has_topic:
            raise InvalidDeliveryTarget("topic must not be blank")
        if has_token == has_topic:
            raise InvalidDeliveryTarget("exactly one of token or topic is required")

    @property
    def target_kind(self) -> str:
        return "token" if self.token else "topic"


@dataclass(frozen=True)
class DeliveryResult:
    success: bool
    message_id: str | None = None
    error_code: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class DocumentChange:
    path: str
    change_type: str
    after: dict[str, Any] | None
    before: dict[str, Any] | None = None


@dataclass(frozen=True)
class BroadcastSummary:
    sent: int
    failed: int

    @property
    def total(self) -> int:
        return self.sent + self.failed
