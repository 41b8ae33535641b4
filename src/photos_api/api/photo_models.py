"""Pydantic models for the photos HTTP API."""

from datetime import datetime

from pydantic import BaseModel, Field

from photos_api.domain.photos import Photo, PhotoDraft


class PhotoPayload(BaseModel):
    """Client-supplied photo fields."""

    title: str = Field(min_length=1)
    url: str | None = None
    description: str | None = None
    taken_at: datetime | None = None

    def to_draft(self) -> PhotoDraft:
        return PhotoDraft(
            title=self.title,
            url=self.url,
            description=self.description,
            taken_at=self.taken_at,
        )


class PhotoResponse(BaseModel):
    """Photo as returned by the list endpoint."""

    id: int
    auth: str
    title: str
    url: str | None = None
    description: str | None = None
    taken_at: datetime | None = None

    @classmethod
    def from_photo(cls, photo: Photo) -> "PhotoResponse":
        return cls(
            id=photo.id,
            auth=photo.auth,
            title=photo.title,
            url=photo.url,
            description=photo.description,
            taken_at=photo.taken_at,
        )
