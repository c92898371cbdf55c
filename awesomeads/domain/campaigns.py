"""Campaign records and the helpers that parse them from request input."""
from __future__ import annotations

import re
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, model_serializer

CAMPAIGN_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Identifiers are signed 64-bit integers.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
_INT64_DIGITS = len(str(INT64_MAX))

Int64 = Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Int64 = 0

    @model_serializer(mode="wrap")
    def omit_zero_id(self, handler) -> dict[str, Any]:
        data = handler(self)
        if not data.get("id"):
            data.pop("id", None)
        return data


class SubCampaign(_Record):
    """Targeting detail embedded in a campaign payload."""

    campaign_id: Int64 = 0
    name: str = ""
    sub_io: str = ""
    countries: str = ""
    devices: str = ""


class Campaign(_Record):
    """An AwesomeAds campaign. ``id`` is assigned by the repository."""

    name: str = ""
    company: str = ""
    io: str = ""
    house: StrictBool = False
    subcampaigns: Optional[List[SubCampaign]] = None


def is_campaign_id_syntax(value: str | None) -> bool:
    """True when ``value`` is an optionally signed run of ASCII digits."""
    return bool(value) and bool(CAMPAIGN_ID_PATTERN.fullmatch(value))


def parse_campaign_id(value: str | None) -> int | None:
    """Return the integer id for a path segment, or None when it is not a 64-bit integer."""
    if not is_campaign_id_syntax(value):
        return None
    digits = value.lstrip("+-").lstrip("0")
    if len(digits) > _INT64_DIGITS:
        return None
    campaign_id = int(value)
    if not INT64_MIN <= campaign_id <= INT64_MAX:
        return None
    return campaign_id


class CampaignError(Exception):
    """Base exception for campaign workflow."""


class InvalidCampaignIdError(CampaignError):
    """Raised when a path identifier is not an integer."""


class InvalidCampaignPayloadError(CampaignError):
    """Raised when a request body cannot be decoded into a Campaign."""


class CampaignNotFoundError(CampaignError):
    """Raised when no campaign carries the requested identifier."""

    def __init__(self, campaign_id: int) -> None:
        super().__init__(f"Could not find campaign {campaign_id}")
        self.campaign_id = campaign_id
