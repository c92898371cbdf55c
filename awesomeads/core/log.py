"""Logging setup for the API process."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    # uvicorn installs its own access log; ours comes from the middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
