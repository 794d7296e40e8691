from datetime import datetime
from typing import Literal

from pydantic import EmailStr, Field

from bosan.schemas.base import CamelModel, PartialUpdate


AnnouncementType = Literal["General", "Event", "News", "Update", "Important", "Urgent"]


class AnnouncementCreateRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    type: AnnouncementType = "General"
    is_important: bool = False
    link: str | None = None


class AnnouncementUpdateRequest(PartialUpdate):
    non_nullable = ("title", "content", "type", "is_important")

    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = Field(default=None, min_length=1)
    type: AnnouncementType | None = None
    is_important: bool | None = None
    link: str | None = None


class AnnouncementResponse(CamelModel):
    id: int
    title: str
    content: str
    type: str
    is_important: bool
    link: str | None
    created_at: datetime


class ResourceCreateRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=50, examples=["Legal Document"])
    file_url: str = Field(..., min_length=1, max_length=500)
    thumbnail: str | None = None


class ResourceUpdateRequest(PartialUpdate):
    non_nullable = ("title", "description", "category", "file_url")

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, min_length=1, max_length=50)
    file_url: str | None = Field(default=None, min_length=1, max_length=500)
    thumbnail: str | None = None


class ResourceResponse(CamelModel):
    id: int
    title: str
    description: str
    category: str
    file_url: str
    thumbnail: str | None
    created_at: datetime


class ContactMessageCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)


class ContactMessageUpdateRequest(CamelModel):
    is_read: bool


class ContactMessageResponse(CamelModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    is_read: bool
    created_at: datetime
