"""Mapping from client drafts to photo entities."""

from photos_api.domain.photos import Photo, PhotoDraft


def to_photo(draft: PhotoDraft, auth: str) -> Photo:
    """Build an unsaved photo owned by ``auth`` from a client draft."""
    return Photo(
        id=None,
        auth=auth,
        title=draft.title,
        url=draft.url,
        description=draft.description,
        taken_at=draft.taken_at,
    )
