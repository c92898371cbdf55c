"""
Run the AwesomeAds campaign API.

Usage:
  awesomeads            (or: python -m awesomeads.main)

Host, port and seed file come from AWESOMEADS_HOST / AWESOMEADS_PORT /
AWESOMEADS_DB_PATH; see awesomeads.core.config.
"""
from __future__ import annotations

import uvicorn

from awesomeads.app import create_app
from awesomeads.core.config import get_settings
from awesomeads.core.log import configure_logging
from awesomeads.repositories.json_storage import SeedFileError


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        app = create_app(settings)
    except SeedFileError as exc:
        raise SystemExit(str(exc))
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
