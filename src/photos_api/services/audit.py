"""Audit logging service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from photos_api.domain.photos import Photo, RequestOrigin

logger = logging.getLogger(__name__)


class AuditRepository(Protocol):
    """Persistence interface for audit events."""

    def create_event(  # noqa: PLR0913
        self,
        actor: str | None,
        origin: RequestOrigin,
        action: str,
        entity_id: int | None,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> None:
        """Create an audit event row."""


@dataclass
class AuditService:
    """Service for recording audit events."""

    repository: AuditRepository

    def record_event(  # noqa: PLR0913
        self,
        actor: str | None,
        origin: RequestOrigin,
        action: str,
        entity_id: int | None = None,
        before: Photo | None = None,
        after: Photo | None = None,
    ) -> None:
        """Log and persist an audit event."""
        before_json = before.to_dict() if before else None
        after_json = after.to_dict() if after else None
        logger.info(
            "%s %s from %s by %s: action=%s photo=%s before=%s after=%s",
            origin.method,
            origin.path,
            origin.client,
            actor or "anonymous",
            action,
            entity_id,
            before_json,
            after_json,
        )
        self.repository.create_event(
            actor=actor,
            origin=origin,
            action=action,
            entity_id=entity_id,
            before=before_json,
            after=after_json,
        )
