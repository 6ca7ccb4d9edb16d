from sujaluxe.notifications.channels import Channel
from sujaluxe.notifications.events import MarketEvent, NotificationType


NOTIFICATION_RULES = {

    MarketEvent.ORDER_PLACED: {
        Channel.IN_APP: True,
        Channel.LIVE_EVENT: True,
    },

    MarketEvent.ORDER_STATUS_CHANGED: {
        Channel.IN_APP: True,
        Channel.LIVE_EVENT: True,
    },

    MarketEvent.BID_PLACED: {
        Channel.IN_APP: True,
        Channel.LIVE_EVENT: True,
    },

    MarketEvent.AUCTION_WON: {
        Channel.IN_APP: True,
        Channel.LIVE_EVENT: True,
    },

    MarketEvent.NEGOTIATION_OPENED: {
        Channel.IN_APP: True,
        Channel.LIVE_BADGE: True,
    },

    MarketEvent.NEGOTIATION_MESSAGE: {
        Channel.IN_APP: True,
        Channel.LIVE_EVENT: True,
    },

    MarketEvent.NEGOTIATION_DECIDED: {
        Channel.IN_APP: True,
        Channel.LIVE_BADGE: True,
    },

    MarketEvent.REVIEW_POSTED: {
        Channel.IN_APP: True,
        Channel.LIVE_BADGE: True,
    },

    MarketEvent.LOW_STOCK: {
        Channel.IN_APP: True,
        Channel.LIVE_BADGE: True,
    },

}


NOTIFICATION_TYPES = {
    MarketEvent.ORDER_PLACED: NotificationType.ORDER,
    MarketEvent.ORDER_STATUS_CHANGED: NotificationType.ORDER,
    MarketEvent.BID_PLACED: NotificationType.AUCTION,
    MarketEvent.AUCTION_WON: NotificationType.AUCTION,
    MarketEvent.NEGOTIATION_OPENED: NotificationType.NEGOTIATION,
    MarketEvent.NEGOTIATION_MESSAGE: NotificationType.NEGOTIATION,
    MarketEvent.NEGOTIATION_DECIDED: NotificationType.NEGOTIATION,
    MarketEvent.REVIEW_POSTED: NotificationType.REVIEW,
    MarketEvent.LOW_STOCK: NotificationType.LOW_STOCK,
}
