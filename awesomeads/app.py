from __future__ import annotations

import logging
import time

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from awesomeads.core.config import Settings, get_settings
from awesomeads.repositories import json_storage
from awesomeads.repositories.memory_repository import CampaignRepository
from awesomeads.routers import campaigns as campaigns_router
from awesomeads.services.campaign_service import CampaignService

logger = logging.getLogger(__name__)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request with method, path, status and elapsed time."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


def create_app(settings: Settings | None = None, repository: CampaignRepository | None = None) -> FastAPI:
    """Build the API with its repository seeded from disk.

    Raises json_storage.SeedFileError when the seed file cannot be read.
    Passing ``repository`` skips the seed file entirely.
    """
    settings = settings or get_settings()
    if repository is None:
        repository = CampaignRepository(json_storage.load(settings.db_path))

    app = FastAPI(title="AwesomeAds Campaign API")
    app.state.settings = settings
    app.state.campaign_service = CampaignService(repository)
    app.add_middleware(AccessLogMiddleware)
    app.include_router(campaigns_router.router)
    return app
