from enum import Enum


# ---------- ACCOUNTS ----------

class UserType(str, Enum):
    retailer = "retailer"
    customer = "customer"


# ---------- ORDERS ----------

class PaymentStatus(str, Enum):
    pending = "pending"
    completed = "completed"
    failed = "failed"


class OrderStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    shipped = "shipped"
    delivered = "delivered"
    cancelled = "cancelled"


# orders in these states no longer count as active
CLOSED_ORDER_STATUSES = {OrderStatus.delivered, OrderStatus.cancelled}


# ---------- AUCTIONS ----------

class AuctionStatus(str, Enum):
    active = "active"
    ended = "ended"
    cancelled = "cancelled"


# ---------- REVIEWS / CAMPAIGNS ----------

class ReviewStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class CampaignStatus(str, Enum):
    draft = "draft"
    active = "active"
    ended = "ended"


class Visibility(str, Enum):
    public = "public"
    private = "private"


# ---------- NEGOTIATIONS ----------

class NegotiationStatus(str, Enum):
    active = "active"
    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"
    closed = "closed"


# ---------- PRODUCTS ----------

class PlacementType(str, Enum):
    wall = "wall"
    floor = "floor"
