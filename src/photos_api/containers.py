"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from photos_api.adapters.supabase_audit_repository import SupabaseAuditRepository
from photos_api.adapters.supabase_photo_repository import SupabasePhotoRepository
from photos_api.adapters.websocket_broker import InMemoryBroker
from photos_api.config import Settings, parse_api_keys
from photos_api.domain.photos import Principal
from photos_api.services.audit import AuditService
from photos_api.services.photos import PhotoService
from photos_api.services.rate_limit import MovingWindowLimiter


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    principals: dict[str, Principal]
    broker: InMemoryBroker
    photo_service: PhotoService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    broker = InMemoryBroker()
    photo_service = PhotoService(
        repository=SupabasePhotoRepository(supabase_client),
        broadcaster=broker,
        rate_limiter=MovingWindowLimiter.from_string(
            resolved_settings.create_rate_limit
        ),
        audit_service=AuditService(SupabaseAuditRepository(supabase_client)),
        topic=resolved_settings.photos_topic,
    )
    return AppContainer(
        settings=resolved_settings,
        principals=parse_api_keys(resolved_settings.api_keys),
        broker=broker,
        photo_service=photo_service,
    )
