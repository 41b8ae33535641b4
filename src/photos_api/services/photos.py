"""Photo CRUD orchestration."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from photos_api.domain.errors import (
    PhotoAccessDeniedError,
    PhotoNotFoundError,
    RateLimitExceededError,
)
from photos_api.domain.photos import (
    Photo,
    PhotoChange,
    PhotoDraft,
    Principal,
    RequestOrigin,
)
from photos_api.services.audit import AuditService
from photos_api.services.photo_mapper import to_photo
from photos_api.services.rate_limit import RateLimiter

logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photos."""

    def find_all(self) -> list[Photo]:
        """Return every stored photo."""

    def find_by_id(self, photo_id: int) -> Photo | None:
        """Return the photo with the given id, if present."""

    def save(self, photo: Photo) -> Photo:
        """Insert a photo without an id, or overwrite the one with its id."""

    def delete_by_id(self, photo_id: int) -> None:
        """Delete the photo with the given id."""


class PhotoBroadcaster(Protocol):
    """Publishes photo state to topic subscribers."""

    def publish(self, topic: str, message: dict[str, object]) -> None:
        """Deliver a message to every subscriber of the topic."""


@dataclass
class PhotoService:
    """Application service for photo lifecycle actions."""

    repository: PhotoRepository
    broadcaster: PhotoBroadcaster
    rate_limiter: RateLimiter
    audit_service: AuditService
    topic: str = "/photos/websocket"

    def list_photos(self, origin: RequestOrigin) -> list[Photo]:
        """Return all photos."""
        photos = self.repository.find_all()
        try:
            self.audit_service.record_event(actor=None, origin=origin, action="list")
        except Exception:
            logger.exception("Failed to record audit event for photo list")
        return photos

    def create_photo(
        self, draft: PhotoDraft, principal: Principal, origin: RequestOrigin
    ) -> Photo:
        """Persist a new photo owned by the caller and announce it."""
        if not self.rate_limiter.try_consume():
            self.audit_service.record_event(
                actor=principal.name, origin=origin, action="create_rate_limited"
            )
            raise RateLimitExceededError("Photo creation rate limit exceeded")

        photo = self.repository.save(to_photo(draft, auth=principal.name))
        self.broadcaster.publish(self.topic, photo.to_dict())
        self.audit_service.record_event(
            actor=principal.name,
            origin=origin,
            action="create",
            entity_id=photo.id,
            after=photo,
        )
        return photo

    def edit_photo(
        self,
        photo_id: int,
        draft: PhotoDraft,
        principal: Principal,
        origin: RequestOrigin,
    ) -> PhotoChange:
        """Overwrite a photo owned by the caller.

        The stored owner is kept; only the draft fields are replaced and the
        path id always wins over anything the mapping produced.
        """
        existing = self._get(photo_id)
        if existing.auth != principal.name:
            logger.warning(
                "%s denied edit of photo %s owned by %s",
                principal.name,
                photo_id,
                existing.auth,
            )
            raise PhotoAccessDeniedError(photo_id, principal.name)

        updated = replace(to_photo(draft, auth=existing.auth), id=photo_id)
        saved = self.repository.save(updated)
        self.broadcaster.publish(self.topic, saved.to_dict())
        self.audit_service.record_event(
            actor=principal.name,
            origin=origin,
            action="edit",
            entity_id=photo_id,
            before=existing,
            after=saved,
        )
        return PhotoChange(before=existing, after=saved)

    def delete_photo(
        self, photo_id: int, principal: Principal, origin: RequestOrigin
    ) -> PhotoChange:
        """Remove a photo and announce its last known state."""
        if not principal.is_admin:
            logger.warning("%s denied delete of photo %s", principal.name, photo_id)
            raise PhotoAccessDeniedError(photo_id, principal.name)

        existing = self._get(photo_id)
        self.repository.delete_by_id(photo_id)
        self.broadcaster.publish(self.topic, existing.to_dict())
        self.audit_service.record_event(
            actor=principal.name,
            origin=origin,
            action="delete",
            entity_id=photo_id,
            before=existing,
        )
        return PhotoChange(before=existing, after=None)

    def _get(self, photo_id: int) -> Photo:
        photo = self.repository.find_by_id(photo_id)
        if photo is None:
            raise PhotoNotFoundError(photo_id)
        return photo
