from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query
from sqlmodel import Session

from sujaluxe.constants.statuses import UserType
from sujaluxe.database import get_session
from sujaluxe.dependencies.connections import get_connection_registry
from sujaluxe.models.auction import Auction
from sujaluxe.notifications import ConnectionRegistry, Identity, MarketEvent, PushType, dispatch_event
from sujaluxe.schemas.auction_schemas import (
    AuctionClose,
    AuctionCreate,
    AuctionRead,
    AuctionWithBids,
    BidCreate,
    BidRead,
)
from sujaluxe.services import auction_service

router = APIRouter()


def _with_bids(auction, bids) -> AuctionWithBids:
    return AuctionWithBids(
        **AuctionRead.model_validate(auction).model_dump(),
        bids=[BidRead.model_validate(b) for b in bids],
    )


@router.get("", response_model=List[AuctionWithBids])
def list_auctions(
    customer_id: Optional[str] = Query(None, alias="customerId"),
    retailer_id: Optional[str] = Query(None, alias="retailerId"),
    active: Optional[bool] = None,
    session: Session = Depends(get_session),
):
    auctions = auction_service.list_auctions(
        session,
        customer_id=customer_id,
        retailer_id=retailer_id,
        active_only=bool(active),
    )
    bids = auction_service.bids_for(session, [a.id for a in auctions])
    return [_with_bids(a, bids[a.id]) for a in auctions]


@router.get("/{auction_id}", response_model=AuctionWithBids)
def get_auction(auction_id: str, session: Session = Depends(get_session)):
    auction = auction_service.get_auction(session, auction_id)
    bids = auction_service.bids_for(session, [auction.id])[auction.id]
    return _with_bids(auction, bids)


@router.post("", response_model=AuctionRead, status_code=201)
def create_auction(data: AuctionCreate, session: Session = Depends(get_session)):
    auction = Auction(**data.model_dump())

    session.add(auction)
    session.commit()
    session.refresh(auction)

    return AuctionRead.model_validate(auction)


# ---------------------------------------------------------
# BIDDING
# ---------------------------------------------------------

@router.post("/{auction_id}/bids", response_model=BidRead, status_code=201)
def place_bid(
    auction_id: str,
    data: BidCreate,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
    registry: ConnectionRegistry = Depends(get_connection_registry),
):
    auction, bid = auction_service.place_bid(session, auction_id, data)
    bid_read = BidRead.model_validate(bid)

    dispatch_event(
        event=MarketEvent.BID_PLACED,
        recipient=Identity.of(auction.customer_id, UserType.customer),
        session=session,
        registry=registry,
        background_tasks=background_tasks,
        title="New Bid on Your Auction",
        message=f"A retailer has placed a bid of ₹{bid_read.bid_amount}",
        related_id=auction.id,
        push={
            "type": PushType.NEW_BID.value,
            "auctionId": auction.id,
            "bid": bid_read.model_dump(mode="json", by_alias=True),
        },
    )

    return bid_read


@router.post("/{auction_id}/close", response_model=AuctionRead)
def close_auction(
    auction_id: str,
    background_tasks: BackgroundTasks,
    data: Optional[AuctionClose] = None,
    session: Session = Depends(get_session),
    registry: ConnectionRegistry = Depends(get_connection_registry),
):
    auction = auction_service.close_auction(session, auction_id, data.winner_id if data else None)
    auction_read = AuctionRead.model_validate(auction)

    dispatch_event(
        event=MarketEvent.AUCTION_WON,
        recipient=Identity.of(auction_read.winner_id, UserType.retailer),
        session=session,
        registry=registry,
        background_tasks=background_tasks,
        title="You Won an Auction!",
        message="Congratulations! You won the auction",
        related_id=auction_read.id,
        push={
            "type": PushType.AUCTION_WON.value,
            "auction": auction_read.model_dump(mode="json", by_alias=True),
        },
    )

    return auction_read
