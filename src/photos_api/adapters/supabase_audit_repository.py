"""Supabase repository for audit events."""

from dataclasses import dataclass

from supabase import Client

from photos_api.domain.photos import RequestOrigin
from photos_api.services.audit import AuditRepository


@dataclass
class SupabaseAuditRepository(AuditRepository):
    """Supabase-backed audit repository."""

    client: Client

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
        self.client.table("audit_events").insert(
            {
                "actor": actor,
                "client": origin.client,
                "method": origin.method,
                "path": origin.path,
                "action": action,
                "entity_type": "photo",
                "entity_id": entity_id,
                "before_json": before,
                "after_json": after,
            }
        ).execute()
