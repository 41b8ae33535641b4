"""Tests for audit service."""

from photos_api.domain.photos import Photo, RequestOrigin
from photos_api.services.audit import AuditService
from tests.conftest import InMemoryAuditRepository


def test_record_event_serializes_snapshots() -> None:
    repository = InMemoryAuditRepository()
    service = AuditService(repository)
    origin = RequestOrigin(client="10.0.0.2", method="DELETE", path="/photos/3")
    photo = Photo(id=3, auth="u1", title="A", url="a.jpg")

    service.record_event(
        actor="root", origin=origin, action="delete", entity_id=3, before=photo
    )

    assert repository.events == [
        {
            "actor": "root",
            "origin": origin,
            "action": "delete",
            "entity_id": 3,
            "before": photo.to_dict(),
            "after": None,
        }
    ]


def test_record_event_without_actor() -> None:
    repository = InMemoryAuditRepository()
    service = AuditService(repository)
    origin = RequestOrigin(client=None, method="GET", path="/photos")

    service.record_event(actor=None, origin=origin, action="list")

    assert repository.events[0]["actor"] is None
    assert repository.events[0]["entity_id"] is None
