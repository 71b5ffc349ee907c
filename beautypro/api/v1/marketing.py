from __future__ import annotations

from fastapi import APIRouter, Depends

from beautypro.api.v1.auth import require_area
from beautypro.api.v1.schemas import CampaignActionSchema, CampaignSchema
from beautypro.application.use_cases.marketing import MarketingUseCase
from beautypro.domain.entities.user import User
from beautypro.wiring.dependencies import get_marketing_use_case, today


router = APIRouter(prefix="/marketing")


@router.get("/campaigns", response_model=list[CampaignSchema])
def campaigns(
    _: User = Depends(require_area("marketing")),
    uc: MarketingUseCase = Depends(get_marketing_use_case),
):
    return uc.campaigns(today())


@router.post("/campaigns/{campaign_key}/send", response_model=CampaignActionSchema)
def send_campaign(
    campaign_key: str,
    _: User = Depends(require_area("marketing")),
    uc: MarketingUseCase = Depends(get_marketing_use_case),
):
    return uc.campaign_action(campaign_key, today())
