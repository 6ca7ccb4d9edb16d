from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select

from sujaluxe.constants.statuses import CampaignStatus
from sujaluxe.database import get_session
from sujaluxe.models.campaign import Campaign
from sujaluxe.schemas.campaign_schemas import CampaignCreate, CampaignRead, CampaignUpdate

router = APIRouter()

# columns that cannot be cleared
REQUIRED_FIELDS = {"name", "start_date", "end_date", "status", "visibility_level"}


@router.get("", response_model=List[CampaignRead])
def list_campaigns(
    retailer_id: Optional[str] = Query(None, alias="retailerId"),
    active: Optional[bool] = None,
    session: Session = Depends(get_session),
):
    if retailer_id:
        query = select(Campaign).where(Campaign.retailer_id == retailer_id)
    elif active:
        query = select(Campaign).where(Campaign.status == CampaignStatus.active)
    else:
        return []

    return session.exec(query.order_by(Campaign.start_date.desc())).all()


@router.post("", response_model=CampaignRead, status_code=201)
def create_campaign(data: CampaignCreate, session: Session = Depends(get_session)):
    if data.end_date <= data.start_date:
        raise HTTPException(400, "endDate must be after startDate")

    campaign = Campaign(**data.model_dump())

    session.add(campaign)
    session.commit()
    session.refresh(campaign)

    return CampaignRead.model_validate(campaign)


@router.put("/{campaign_id}", response_model=CampaignRead)
def update_campaign(
    campaign_id: str,
    data: CampaignUpdate,
    session: Session = Depends(get_session),
):
    campaign = session.get(Campaign, campaign_id)
    if not campaign:
        raise HTTPException(404, "Campaign not found")

    changes = {
        field: value
        for field, value in data.model_dump(exclude_unset=True).items()
        if value is not None or field not in REQUIRED_FIELDS
    }

    start_date = changes.get("start_date", campaign.start_date)
    end_date = changes.get("end_date", campaign.end_date)
    if end_date <= start_date:
        raise HTTPException(400, "endDate must be after startDate")

    for field, value in changes.items():
        setattr(campaign, field, value)

    session.add(campaign)
    session.commit()
    session.refresh(campaign)

    return CampaignRead.model_validate(campaign)
