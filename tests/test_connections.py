import asyncio

from starlette.websockets import WebSocketState

from sujaluxe.constants.statuses import UserType
from sujaluxe.notifications import ConnectionRegistry, Identity


class FakeSocket:
    def __init__(self, fail=False, open=True):
        state = WebSocketState.CONNECTED if open else WebSocketState.DISCONNECTED
        self.client_state = state
        self.application_state = state
        self.fail = fail
        self.sent = []

    async def send_json(self, message):
        if self.fail:
            raise RuntimeError("socket already closed")
        self.sent.append(message)


RETAILER = Identity.of("R1", "retailer")
CUSTOMER = Identity.of("C1", UserType.customer)


def test_identity_normalises_user_type():
    assert RETAILER == Identity("R1", UserType.retailer)
    assert str(RETAILER) == "retailer:R1"


def test_push_reaches_every_socket_of_identity_only():
    registry = ConnectionRegistry()
    laptop, phone, other = FakeSocket(), FakeSocket(), FakeSocket()
    registry.register(laptop, RETAILER)
    registry.register(phone, RETAILER)
    registry.register(other, CUSTOMER)

    delivered = asyncio.run(registry.send_to(RETAILER, {"type": "new_order"}))

    assert delivered == 2
    assert laptop.sent == phone.sent == [{"type": "new_order"}]
    assert other.sent == []


def test_failing_and_closed_sockets_are_skipped():
    registry = ConnectionRegistry()
    good, broken, closed = FakeSocket(), FakeSocket(fail=True), FakeSocket(open=False)
    for socket in (good, broken, closed):
        registry.register(socket, RETAILER)

    delivered = asyncio.run(registry.send_to(RETAILER, {"type": "new_bid"}))

    assert delivered == 1
    assert good.sent == [{"type": "new_bid"}]
    assert closed.sent == []


def test_reauth_moves_socket_to_new_identity():
    registry = ConnectionRegistry()
    socket = FakeSocket()
    registry.register(socket, RETAILER)
    registry.register(socket, CUSTOMER)

    assert registry.connections_for(RETAILER) == []
    assert registry.connections_for(CUSTOMER) == [socket]
    assert len(registry) == 1


def test_unregister():
    registry = ConnectionRegistry()
    socket = FakeSocket()
    registry.register(socket, RETAILER)

    assert registry.unregister(socket) == RETAILER
    assert registry.unregister(socket) is None
    assert registry.identity_of(socket) is None
    assert asyncio.run(registry.send_to(RETAILER, {"type": "pong"})) == 0
