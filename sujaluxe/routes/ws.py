"""
``/ws``: the live channel.

Clients connect, send ``{"type": "auth", "userId": ..., "userType": ...}``
and from then on receive every push addressed to that identity. Bad input
is answered with an ``error`` message; the socket stays open.
"""
import json
import logging
from typing import Annotated, Literal, Union

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from pydantic import Field, TypeAdapter, ValidationError

from sujaluxe.constants.statuses import UserType
from sujaluxe.dependencies.connections import get_connection_registry
from sujaluxe.notifications import ConnectionRegistry, Identity, PushType
from sujaluxe.schemas.base import APIModel

logger = logging.getLogger(__name__)

router = APIRouter()


class AuthMessage(APIModel):
    type: Literal["auth"]
    user_id: str = Field(min_length=1)
    user_type: UserType


class PingMessage(APIModel):
    type: Literal["ping"]


ClientMessage = TypeAdapter(
    Annotated[Union[AuthMessage, PingMessage], Field(discriminator="type")]
)


def _error(message: str) -> dict:
    return {"type": PushType.ERROR.value, "message": message}


async def _receive_frame(websocket: WebSocket) -> str:
    """Next text payload; binary frames are decoded as UTF-8."""
    frame = await websocket.receive()

    if frame["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(frame.get("code", 1000))

    if frame.get("text") is not None:
        return frame["text"]
    return (frame.get("bytes") or b"").decode("utf-8")


@router.websocket("/ws")
async def live_socket(
    websocket: WebSocket,
    registry: ConnectionRegistry = Depends(get_connection_registry),
):
    await websocket.accept()

    try:
        while True:
            try:
                raw = await _receive_frame(websocket)
                message = ClientMessage.validate_python(json.loads(raw))
            except UnicodeDecodeError:
                await websocket.send_json(_error("Binary frames must be UTF-8 JSON"))
                continue
            except json.JSONDecodeError:
                await websocket.send_json(_error("Invalid JSON"))
                continue
            except ValidationError as exc:
                await websocket.send_json(_error(f"Invalid message: {exc.errors()[0]['msg']}"))
                continue

            if isinstance(message, AuthMessage):
                identity = Identity.of(message.user_id, message.user_type)
                registry.register(websocket, identity)
                await websocket.send_json({"type": PushType.AUTH_SUCCESS.value})
            else:
                await websocket.send_json({"type": PushType.PONG.value})

    except WebSocketDisconnect:
        pass
    finally:
        identity = registry.unregister(websocket)
        if identity is not None:
            logger.info(f"Socket closed for {identity}")
