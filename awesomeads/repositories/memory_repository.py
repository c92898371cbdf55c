"""In-memory campaign store with auto-incrementing identifiers."""
from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional, Tuple

from awesomeads.domain.campaigns import Campaign, CampaignNotFoundError

logger = logging.getLogger(__name__)

# Seed data occupies ids up to here; the first saved campaign gets 101.
LAST_INDEX_START = 100


class CampaignRepository:
    """List-backed campaign collection.

    Lookups are linear scans over append order. Every operation holds one lock
    and hands out copies, so concurrent request threads never observe a
    half-applied insert or delete.
    """

    def __init__(self, campaigns: Optional[Iterable[Campaign]] = None, last_index: int = LAST_INDEX_START) -> None:
        self._campaigns: List[Campaign] = [c.model_copy(deep=True) for c in campaigns or ()]
        self._last_index = last_index
        self._lock = threading.Lock()

    @property
    def last_index(self) -> int:
        with self._lock:
            return self._last_index

    def list_campaigns(self) -> List[Campaign]:
        with self._lock:
            return [c.model_copy(deep=True) for c in self._campaigns]

    def get_campaign(self, campaign_id: int) -> Tuple[bool, Campaign]:
        with self._lock:
            for campaign in self._campaigns:
                if campaign.id == campaign_id:
                    return True, campaign.model_copy(deep=True)
        return False, Campaign()

    def save_campaign(self, campaign: Campaign) -> Campaign:
        """Store ``campaign`` under the next id, ignoring any id it carries."""
        with self._lock:
            self._last_index += 1
            stored = campaign.model_copy(update={"id": self._last_index}, deep=True)
            self._campaigns.append(stored)
        logger.info("saved campaign %d", stored.id)
        return stored.model_copy(deep=True)

    def delete_campaign(self, campaign_id: int) -> Campaign:
        with self._lock:
            for index, campaign in enumerate(self._campaigns):
                if campaign.id == campaign_id:
                    del self._campaigns[index]
                    break
            else:
                raise CampaignNotFoundError(campaign_id)
        logger.info("deleted campaign %d", campaign_id)
        return campaign
