from starlette.requests import HTTPConnection

from sujaluxe.notifications.connections import ConnectionRegistry


def get_connection_registry(connection: HTTPConnection) -> ConnectionRegistry:
    """The registry created with the app, for both HTTP and WebSocket routes."""
    return connection.app.state.connections
