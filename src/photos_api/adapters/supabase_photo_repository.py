"""Supabase-backed photo repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from photos_api.domain.photos import Photo
from photos_api.services.photos import PhotoRepository

_TABLE = "photos"


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photo persistence."""

    client: Client

    def find_all(self) -> list[Photo]:
        """Return every photo ordered by id."""
        response = self.client.table(_TABLE).select("*").order("id").execute()
        return [_parse_photo(row) for row in response.data or []]

    def find_by_id(self, photo_id: int) -> Photo | None:
        """Return a photo by id, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", photo_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_photo(response.data[0])

    def save(self, photo: Photo) -> Photo:
        """Insert a new photo or overwrite the row sharing its id."""
        row = _serialize_photo(photo)
        table = self.client.table(_TABLE)
        if photo.id is None:
            row.pop("id")
            response = table.insert(row).execute()
        else:
            response = table.upsert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to save photo")
        return _parse_photo(response.data[0])

    def delete_by_id(self, photo_id: int) -> None:
        """Delete a photo row."""
        self.client.table(_TABLE).delete().eq("id", photo_id).execute()


def _serialize_photo(photo: Photo) -> dict[str, object]:
    return {
        "id": photo.id,
        "auth": photo.auth,
        "title": photo.title,
        "url": photo.url,
        "description": photo.description,
        "taken_at": photo.taken_at.isoformat() if photo.taken_at else None,
    }


def _parse_photo(row: dict[str, object]) -> Photo:
    taken_at_raw = row.get("taken_at")
    taken_at = (
        datetime.fromisoformat(str(taken_at_raw)) if taken_at_raw else None
    )
    return Photo(
        id=int(row["id"]),
        auth=str(row["auth"]),
        title=str(row["title"]),
        url=row.get("url"),
        description=row.get("description"),
        taken_at=taken_at,
    )
