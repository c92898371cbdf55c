from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from awesomeads.domain.campaigns import (
    CampaignNotFoundError,
    InvalidCampaignIdError,
    InvalidCampaignPayloadError,
)
from awesomeads.services.campaign_service import CampaignService

router = APIRouter(tags=["campaigns"])


def _get_campaign_service(request: Request) -> CampaignService:
    svc = getattr(getattr(request.app, "state", None), "campaign_service", None)
    if not svc:
        raise RuntimeError("CampaignService not configured")
    return svc


@router.get("/campaigns")
def list_campaigns(request: Request):
    svc = _get_campaign_service(request)
    return JSONResponse([c.model_dump(mode="json") for c in svc.list_campaigns()])


@router.get("/campaign/{campaign_id}")
def get_campaign(campaign_id: str, request: Request):
    svc = _get_campaign_service(request)
    try:
        cid = svc.parse_id(campaign_id)
    except InvalidCampaignIdError as exc:
        return PlainTextResponse(str(exc), status_code=400)
    found, campaign = svc.get_campaign(cid)
    if found:
        return JSONResponse(campaign.model_dump(mode="json"))
    return PlainTextResponse(f"Campaign {cid} not found", status_code=404)


@router.post("/campaign")
async def save_campaign(request: Request):
    svc = _get_campaign_service(request)
    body = await request.body()
    try:
        campaign = svc.create_campaign(body)
    except InvalidCampaignPayloadError as exc:
        return PlainTextResponse(str(exc), status_code=400)
    return JSONResponse(campaign.model_dump(mode="json"))


@router.delete("/campaign/{campaign_id}")
def delete_campaign(campaign_id: str, request: Request):
    svc = _get_campaign_service(request)
    try:
        cid = svc.parse_id(campaign_id)
    except InvalidCampaignIdError as exc:
        return PlainTextResponse(str(exc), status_code=400)
    try:
        campaign = svc.delete_campaign(cid)
    except CampaignNotFoundError as exc:
        # delete misses map to 500, unlike read misses
        return PlainTextResponse(str(exc), status_code=500)
    return JSONResponse(campaign.model_dump(mode="json"))
