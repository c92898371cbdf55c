"""
Seed loader for the campaign collection.

The file is read once at startup and never written back. A record with a
badly typed field still loads, with that field left at its default.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, List

from pydantic import TypeAdapter, ValidationError

from awesomeads.domain.campaigns import Campaign

logger = logging.getLogger(__name__)

_campaign_list = TypeAdapter(List[Campaign])


class SeedFileError(RuntimeError):
    """Raised when the seed file cannot be read at all."""


def _drop_at(data: Any, loc: tuple) -> Any:
    """Remove the value at ``loc`` so validation falls back to the field default."""
    if not loc:
        return {}
    target = data
    for key in loc[:-1]:
        target = target[key]
    last = loc[-1]
    if isinstance(target, dict):
        target.pop(last, None)
    elif isinstance(target, list):
        target[last] = {}
    return data


def _decode_record(item: Any) -> Campaign:
    data = copy.deepcopy(item) if isinstance(item, dict) else {}
    try:
        return Campaign.model_validate(data)
    except ValidationError as exc:
        for error in exc.errors():
            data = _drop_at(data, tuple(error["loc"]))
    return Campaign.model_validate(data)


def load(path: str | Path) -> List[Campaign]:
    seed_path = Path(path)
    try:
        content = seed_path.read_bytes()
    except OSError as exc:
        raise SeedFileError(f"could not read seed file {seed_path}: {exc}") from exc

    try:
        payload = json.loads(content)
    except ValueError as exc:
        logger.error("error decoding seed file %s: %s", seed_path, exc)
        return []
    if payload is None:
        payload = []

    try:
        campaigns = _campaign_list.validate_python(payload)
    except ValidationError as exc:
        logger.error("error decoding seed file %s: %s", seed_path, exc)
        if not isinstance(payload, list):
            return []
        campaigns = [_decode_record(item) for item in payload]
    logger.info("loaded %d campaigns from %s", len(campaigns), seed_path)
    return campaigns
