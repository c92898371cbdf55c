"""Campaign use cases (id parsing, payload decoding, CRUD)."""

from __future__ import annotations

import json
from typing import List, Tuple

from pydantic import ValidationError

from awesomeads.domain.campaigns import (
    Campaign,
    InvalidCampaignIdError,
    InvalidCampaignPayloadError,
    is_campaign_id_syntax,
    parse_campaign_id,
)
from awesomeads.repositories.memory_repository import CampaignRepository


class CampaignService:
    """Translates raw request input into repository calls."""

    def __init__(self, repository: CampaignRepository | None = None) -> None:
        self.repository = repository or CampaignRepository()

    def parse_id(self, raw: str | None) -> int:
        campaign_id = parse_campaign_id(raw)
        if campaign_id is None:
            if is_campaign_id_syntax(raw):
                raise InvalidCampaignIdError(f"invalid campaign id {raw!r}: value out of range")
            raise InvalidCampaignIdError(f"invalid campaign id {raw!r}: not an integer")
        return campaign_id

    def decode_campaign(self, raw_body: bytes | str) -> Campaign:
        try:
            payload = json.loads(raw_body)
        except ValueError as exc:
            raise InvalidCampaignPayloadError(f"invalid JSON body: {exc}") from exc
        try:
            # a literal null decodes to an empty campaign
            return Campaign.model_validate(payload if payload is not None else {})
        except ValidationError as exc:
            raise InvalidCampaignPayloadError(str(exc)) from exc

    def list_campaigns(self) -> List[Campaign]:
        return self.repository.list_campaigns()

    def get_campaign(self, campaign_id: int) -> Tuple[bool, Campaign]:
        return self.repository.get_campaign(campaign_id)

    def create_campaign(self, raw_body: bytes | str) -> Campaign:
        campaign = self.decode_campaign(raw_body)
        return self.repository.save_campaign(campaign)

    def delete_campaign(self, campaign_id: int) -> Campaign:
        """Remove a campaign; raises CampaignNotFoundError when absent."""
        return self.repository.delete_campaign(campaign_id)
