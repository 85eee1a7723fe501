"""Hotel-related Pydantic schemas.

Responses use camelCase keys; ``Rooms`` keeps the capitalised name the
front-end reads. Timestamps go out in UTC with millisecond precision and a
``Z`` designator, e.g. ``2024-03-01T12:30:00.000Z``.
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


def _to_utc_iso(value: datetime) -> str:
    # Naive values come from columns stored in UTC (SQLite drops the offset)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


UtcTimestamp = Annotated[datetime, PlainSerializer(_to_utc_iso, return_type=str, when_used="json")]


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Room(_CamelModel):
    """Room response schema."""

    id: int = Field(..., description="Room ID")
    name: str = Field(..., description="Room name")
    capacity: int = Field(..., ge=0, description="Number of guests the room holds")
    hotel_id: int = Field(..., description="Owning hotel ID")
    created_at: UtcTimestamp = Field(..., description="Creation time (ISO 8601, UTC)")
    updated_at: UtcTimestamp = Field(..., description="Last update time (ISO 8601, UTC)")


class Hotel(_CamelModel):
    """Hotel response schema."""

    id: int = Field(..., description="Hotel ID")
    name: str = Field(..., description="Hotel name")
    image: str = Field(..., description="Image URL")
    created_at: UtcTimestamp = Field(..., description="Creation time (ISO 8601, UTC)")
    updated_at: UtcTimestamp = Field(..., description="Last update time (ISO 8601, UTC)")


class HotelWithRooms(Hotel):
    """Hotel response schema including its rooms."""

    rooms: list[Room] = Field(default_factory=list, alias="Rooms", description="Hotel rooms")
