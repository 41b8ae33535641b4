"""Caller resolution and the per-operation access policy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from fastapi import Depends, Header, HTTPException, Request, status

from photos_api.domain.photos import Principal, RequestOrigin

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from photos_api.containers import AppContainer


class Capability(Enum):
    """What a caller must hold to invoke an operation."""

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"


@dataclass(frozen=True)
class Operation:
    """Route and capability for one API operation."""

    method: str
    path: str
    capability: Capability


OPERATIONS: dict[str, Operation] = {
    "list": Operation("GET", "/photos", Capability.PUBLIC),
    "create": Operation("POST", "/photos", Capability.AUTHENTICATED),
    "edit": Operation("PUT", "/photos/{photo_id}", Capability.AUTHENTICATED),
    "delete": Operation("DELETE", "/photos/{photo_id}", Capability.ADMIN),
}


def request_origin(request: Request) -> RequestOrigin:
    """Collect the request metadata recorded in audit entries."""
    return RequestOrigin(
        client=request.client.host if request.client else None,
        method=request.method,
        path=request.url.path,
    )


def _resolve_principal(
    request: Request, x_api_key: str | None = Header(default=None)
) -> Principal | None:
    if not x_api_key:
        return None
    container: AppContainer = request.app.state.container
    return container.principals.get(x_api_key)


def authorize(name: str) -> Callable[..., Awaitable[Principal | None]]:
    """Return a dependency enforcing the capability configured for ``name``."""
    capability = OPERATIONS[name].capability

    async def dependency(
        principal: Principal | None = Depends(_resolve_principal),
    ) -> Principal | None:
        if capability is Capability.PUBLIC:
            return principal
        if principal is None:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
        if capability is Capability.ADMIN and not principal.is_admin:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN)
        return principal

    return dependency
