"""Photo CRUD endpoints and the change stream."""

import asyncio
import logging

from fastapi import (
    APIRouter,
    Depends,
    Request,
    Response,
    WebSocket,
    WebSocketDisconnect,
)

from photos_api.adapters.websocket_broker import Subscription
from photos_api.api.access import OPERATIONS, authorize, request_origin
from photos_api.api.photo_models import PhotoPayload, PhotoResponse
from photos_api.containers import AppContainer
from photos_api.domain.photos import Principal, RequestOrigin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["photos"])


async def list_photos(
    request: Request, origin: RequestOrigin = Depends(request_origin)
) -> list[PhotoResponse]:
    """Retrieve all photos."""
    container: AppContainer = request.app.state.container
    photos = container.photo_service.list_photos(origin)
    return [PhotoResponse.from_photo(photo) for photo in photos]


async def create_photo(
    payload: PhotoPayload,
    request: Request,
    principal: Principal = Depends(authorize("create")),
    origin: RequestOrigin = Depends(request_origin),
) -> Response:
    """Add a new photo owned by the caller."""
    container: AppContainer = request.app.state.container
    container.photo_service.create_photo(payload.to_draft(), principal, origin)
    return Response()


async def edit_photo(
    photo_id: int,
    payload: PhotoPayload,
    request: Request,
    principal: Principal = Depends(authorize("edit")),
    origin: RequestOrigin = Depends(request_origin),
) -> Response:
    """Replace the fields of a photo the caller owns."""
    container: AppContainer = request.app.state.container
    container.photo_service.edit_photo(
        photo_id, payload.to_draft(), principal, origin
    )
    return Response()


async def delete_photo(
    photo_id: int,
    request: Request,
    principal: Principal = Depends(authorize("delete")),
    origin: RequestOrigin = Depends(request_origin),
) -> Response:
    """Delete a photo. Admin only."""
    container: AppContainer = request.app.state.container
    container.photo_service.delete_photo(photo_id, principal, origin)
    return Response()


_HANDLERS = {
    "list": list_photos,
    "create": create_photo,
    "edit": edit_photo,
    "delete": delete_photo,
}

for _name, _operation in OPERATIONS.items():
    router.add_api_route(
        _operation.path,
        _HANDLERS[_name],
        methods=[_operation.method],
        name=f"{_name}_photo",
    )


async def _forward(websocket: WebSocket, subscription: Subscription) -> None:
    while True:
        message = await subscription.receive()
        await websocket.send_json(message)


async def _wait_for_close(websocket: WebSocket) -> None:
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return


@router.websocket("/photos/websocket")
async def photo_stream(websocket: WebSocket) -> None:
    """Push every photo change to the connected client until it leaves."""
    container: AppContainer = websocket.app.state.container
    topic = container.settings.photos_topic
    with container.broker.subscription(topic) as subscription:
        await websocket.accept()
        tasks = {
            asyncio.create_task(_forward(websocket, subscription)),
            asyncio.create_task(_wait_for_close(websocket)),
        }
        try:
            done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in tasks:
                task.cancel()
        for task in done:
            error = task.exception()
            if error is not None and not isinstance(error, WebSocketDisconnect):
                raise error
    logger.info("Subscriber left %s", topic)
