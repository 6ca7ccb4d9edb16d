from .events import MarketEvent, PushType
from .connections import ConnectionRegistry, Identity
from .dispatcher import dispatch_event

__all__ = [
    "MarketEvent",
    "PushType",
    "ConnectionRegistry",
    "Identity",
    "dispatch_event",
]
