import datetime

from pydantic import Field

from bosan.schemas.base import CamelModel, PartialUpdate


class EventCreateRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    date: datetime.date = Field(..., examples=["2026-11-20"])
    venue: str = Field(..., min_length=1, max_length=200)
    time: str = Field(..., min_length=1, max_length=100, examples=["9:00 AM - 5:00 PM"])
    image: str | None = None
    is_past: bool = False


class EventUpdateRequest(PartialUpdate):
    non_nullable = ("title", "description", "date", "venue", "time", "is_past")

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1)
    date: datetime.date | None = None
    venue: str | None = Field(default=None, min_length=1, max_length=200)
    time: str | None = Field(default=None, min_length=1, max_length=100)
    image: str | None = None
    is_past: bool | None = None


class EventResponse(CamelModel):
    id: int
    title: str
    description: str
    date: datetime.date
    venue: str
    time: str
    image: str | None
    is_past: bool
    created_at: datetime.datetime


class EventRegistrationResponse(CamelModel):
    id: int
    event_id: int
    user_id: int
    created_at: datetime.datetime


class CreatedResponse(CamelModel):
    success: bool = True
    id: int
