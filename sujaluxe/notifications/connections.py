"""
Process-local registry of open WebSocket connections.

A socket is anonymous until the client sends an ``auth`` message naming a
user id and user type; from then on every push addressed to that identity
reaches it. Entries are removed when the socket closes.

The registry is only touched from the event loop (socket callbacks and
background push tasks), so it carries no lock. It does not fan out across
processes.
"""
import logging
from typing import Any, Dict, List, NamedTuple, Optional

from starlette.websockets import WebSocketDisconnect, WebSocketState

from sujaluxe.constants.statuses import UserType

logger = logging.getLogger(__name__)


class Identity(NamedTuple):
    user_id: str
    user_type: UserType

    @classmethod
    def of(cls, user_id: str, user_type) -> "Identity":
        return cls(str(user_id), UserType(user_type))

    def __str__(self):
        return f"{self.user_type.value}:{self.user_id}"


class ConnectionRegistry:
    def __init__(self):
        # keyed by id(): starlette's WebSocket is a Mapping and unhashable
        self._by_identity: Dict[Identity, Dict[int, Any]] = {}
        self._identities: Dict[int, Identity] = {}

    def register(self, connection, identity: Identity):
        """Attach a connection to an identity, replacing any earlier one."""
        self.unregister(connection)
        self._by_identity.setdefault(identity, {})[id(connection)] = connection
        self._identities[id(connection)] = identity
        logger.info(f"Socket registered for {identity}")

    def unregister(self, connection) -> Optional[Identity]:
        identity = self._identities.pop(id(connection), None)
        if identity is None:
            return None

        connections = self._by_identity.get(identity, {})
        connections.pop(id(connection), None)
        if not connections:
            self._by_identity.pop(identity, None)
        return identity

    def identity_of(self, connection) -> Optional[Identity]:
        return self._identities.get(id(connection))

    def connections_for(self, identity: Identity) -> List[Any]:
        return list(self._by_identity.get(identity, {}).values())

    def __len__(self):
        return len(self._identities)

    async def send_to(self, identity: Identity, message: dict) -> int:
        """
        Best-effort push to every open socket of ``identity``.

        Closed sockets are skipped and send failures are dropped; the
        notification row is the durable record. Returns how many sockets
        received the message.
        """
        delivered = 0

        for connection in self.connections_for(identity):
            if not _is_open(connection):
                continue
            try:
                await connection.send_json(message)
            except (WebSocketDisconnect, RuntimeError, OSError) as exc:
                logger.debug(f"Push to {identity} dropped: {exc!r}")
                continue
            delivered += 1

        return delivered


def _is_open(connection) -> bool:
    return (
        connection.client_state == WebSocketState.CONNECTED
        and connection.application_state == WebSocketState.CONNECTED
    )
