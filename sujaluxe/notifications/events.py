from enum import Enum


class MarketEvent(str, Enum):
    ORDER_PLACED = "order_placed"
    ORDER_STATUS_CHANGED = "order_status_changed"
    BID_PLACED = "bid_placed"
    AUCTION_WON = "auction_won"
    NEGOTIATION_OPENED = "negotiation_opened"
    NEGOTIATION_MESSAGE = "negotiation_message"
    NEGOTIATION_DECIDED = "negotiation_decided"
    REVIEW_POSTED = "review_posted"
    LOW_STOCK = "low_stock"


class NotificationType(str, Enum):
    """Value stored in Notification.type."""

    ORDER = "order"
    AUCTION = "auction"
    NEGOTIATION = "negotiation"
    REVIEW = "review"
    LOW_STOCK = "low_stock"


class PushType(str, Enum):
    """`type` field of messages sent over the socket."""

    AUTH_SUCCESS = "auth_success"
    PONG = "pong"
    ERROR = "error"
    NEW_ORDER = "new_order"
    ORDER_UPDATE = "order_update"
    NEW_BID = "new_bid"
    AUCTION_WON = "auction_won"
    NEW_MESSAGE = "new_message"
    NOTIFICATION = "notification"
