"""Photo domain models."""

from dataclasses import dataclass
from datetime import datetime

ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class Photo:
    """Represents a photo stored in the database."""

    id: int | None
    auth: str
    title: str
    url: str | None = None
    description: str | None = None
    taken_at: datetime | None = None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation."""
        return {
            "id": self.id,
            "auth": self.auth,
            "title": self.title,
            "url": self.url,
            "description": self.description,
            "taken_at": self.taken_at.isoformat() if self.taken_at else None,
        }


@dataclass(frozen=True)
class PhotoDraft:
    """Client-supplied photo fields, before an owner or id is attached."""

    title: str
    url: str | None = None
    description: str | None = None
    taken_at: datetime | None = None


@dataclass(frozen=True)
class Principal:
    """Authenticated caller."""

    name: str
    roles: frozenset[str] = frozenset()

    @property
    def is_admin(self) -> bool:
        return ADMIN_ROLE in self.roles


@dataclass(frozen=True)
class RequestOrigin:
    """Request metadata recorded alongside audit entries."""

    client: str | None
    method: str
    path: str


@dataclass(frozen=True)
class PhotoChange:
    """State of a photo before and after a mutation."""

    before: Photo | None
    after: Photo | None
