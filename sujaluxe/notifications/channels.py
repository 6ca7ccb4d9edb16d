from enum import Enum


class Channel(str, Enum):
    IN_APP = "in_app"          # durable notification row
    LIVE_EVENT = "live_event"  # event specific socket message
    LIVE_BADGE = "live_badge"  # generic {"type": "notification"} socket message
