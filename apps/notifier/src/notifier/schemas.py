from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, ValidationError, field_validator

from proximity import GeoPoint, InvalidCoordinate

from notifier.errors import InvalidEventDocument, InvalidLocationDocument
from notifier.models import LocationUpdate, UpcomingEvent


class LocationDocument(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    latitude: StrictFloat | StrictInt
    longitude: StrictFloat | StrictInt
    fcm_token: str | None = Field(default=None, alias="fcmToken")

    @field_validator("fcm_token")
    @classmethod
    def _blank_token_is_missing(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped = value.strip()
        return stripped or None


class EventDocument(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: str = Field(min_length=1)
    description: str | None = None
    date: datetime


def parse_location_update(data: dict[str, Any]) -> LocationUpdate:
    try:
        document = LocationDocument.model_validate(data)
        location = GeoPoint(latitude=document.latitude, longitude=document.longitude)
    except ValidationError as exc:
        raise InvalidLocationDocument(_summarize(exc)) from exc
    except InvalidCoordinate as exc:
        raise InvalidLocationDocument(str(exc)) from exc
    return LocationUpdate(location=location, token=document.fcm_token)


def parse_upcoming_event(event_id: str, data: dict[str, Any]) -> UpcomingEvent:
    try:
        document = EventDocument.model_validate(data)
    except ValidationError as exc:
        raise InvalidEventDocument(f"event {event_id}: {_summarize(exc)}") from exc
    return UpcomingEvent(
        event_id=event_id,
        name=document.name,
        description=document.description,
        date=document.date,
    )


def _summarize(exc: ValidationError) -> str:
    fields = sorted({".".join(str(part) for part in error["loc"]) for error in exc.errors()})
    return f"invalid fields: {', '.join(fields)}"
