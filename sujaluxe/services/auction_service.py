import logging
import threading
import weakref
from decimal import Decimal
from typing import Dict, List, Optional

from sqlmodel import Session, func, select

from sujaluxe.constants.statuses import AuctionStatus
from sujaluxe.models.auction import Auction, Bid
from sujaluxe.schemas.auction_schemas import BidCreate
from sujaluxe.services.errors import InvalidStateError, NotFoundError

logger = logging.getLogger(__name__)


class AuctionLocks:
    """
    One lock per auction id so bids on the same auction are accepted one
    at a time. Only serialises within this process. A lock is dropped
    once no request holds it.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks = weakref.WeakValueDictionary()

    def for_auction(self, auction_id: str) -> threading.Lock:
        with self._guard:
            return self._locks.setdefault(auction_id, threading.Lock())


bid_locks = AuctionLocks()


def get_auction(session: Session, auction_id: str) -> Auction:
    auction = session.get(Auction, auction_id)
    if not auction:
        raise NotFoundError("Auction not found")
    return auction


def list_auctions(
    session: Session,
    customer_id: Optional[str] = None,
    retailer_id: Optional[str] = None,
    active_only: bool = False,
) -> List[Auction]:
    query = select(Auction)

    if customer_id:
        query = query.where(Auction.customer_id == customer_id)
    elif retailer_id:
        query = query.where(Auction.retailer_id == retailer_id)
    elif active_only:
        query = query.where(Auction.status == AuctionStatus.active)

    return session.exec(query.order_by(Auction.created_at.desc())).all()


def bids_for(session: Session, auction_ids: List[str]) -> Dict[str, List[Bid]]:
    grouped: Dict[str, List[Bid]] = {auction_id: [] for auction_id in auction_ids}
    if not auction_ids:
        return grouped

    bids = session.exec(
        select(Bid)
        .where(Bid.auction_id.in_(auction_ids))
        .order_by(Bid.bid_date)
    ).all()

    for bid in bids:
        grouped[bid.auction_id].append(bid)
    return grouped


def place_bid(session: Session, auction_id: str, data: BidCreate) -> tuple:
    """
    Accept a bid on an active auction.

    Every bid on an active auction is stored, whatever its amount. The
    cached highest bid and bidder only move when the new amount beats
    them. Returns ``(auction, bid)``.
    """
    auction = get_auction(session, auction_id)

    with bid_locks.for_auction(auction.id):
        # another request may have changed it while we waited
        session.refresh(auction)

        if auction.status != AuctionStatus.active:
            raise InvalidStateError("Auction is not active")

        bid = Bid(auction_id=auction.id, bidder_id=data.bidder_id, bid_amount=data.bid_amount)
        session.add(bid)
        session.flush()

        current = auction.current_highest_bid
        if current is None or Decimal(bid.bid_amount) > Decimal(current):
            auction.current_highest_bid = bid.bid_amount
            auction.current_bidder_id = bid.bidder_id

        auction.number_of_bidders = session.exec(
            select(func.count(func.distinct(Bid.bidder_id))).where(Bid.auction_id == auction.id)
        ).one()

        session.add(auction)
        session.commit()
        session.refresh(auction)
        session.refresh(bid)

    logger.info(f"Bid {bid.id} of {bid.bid_amount} on auction {auction.id} by {bid.bidder_id}")
    return auction, bid


def close_auction(session: Session, auction_id: str, winner_id: Optional[str] = None) -> Auction:
    """End an active auction. Without an explicit winner the highest bidder wins."""
    auction = get_auction(session, auction_id)

    with bid_locks.for_auction(auction.id):
        session.refresh(auction)

        if auction.status != AuctionStatus.active:
            raise InvalidStateError("Auction is not active")

        winner = winner_id or auction.current_bidder_id
        if not winner:
            raise InvalidStateError("Auction has no bids to pick a winner from")

        auction.status = AuctionStatus.ended
        auction.winner_id = winner
        session.add(auction)
        session.commit()
        session.refresh(auction)

    logger.info(f"Auction {auction.id} closed, winner {auction.winner_id}")
    return auction

