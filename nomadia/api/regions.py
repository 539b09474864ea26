# nomadia/api/regions.py
"""Free-text region lookup against a fixed table of anchor points."""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from nomadia.api.models import RegionCenter

logger = logging.getLogger(__name__)

REGION_CENTERS: Mapping[str, RegionCenter] = MappingProxyType({
    "europe": RegionCenter(47.5, 9.0, "Europe"),
    "asia": RegionCenter(21.0, 105.0, "Asia"),
    "south america": RegionCenter(-15.6, -56.1, "South America"),
    "north america": RegionCenter(40.0, -105.0, "North America"),
    "africa": RegionCenter(2.0, 21.0, "Africa"),
    "oceania": RegionCenter(-25.0, 133.0, "Oceania"),
})

DEFAULT_CENTER = RegionCenter(46.8, 8.3, "Alps")


def normalize_region(text) -> str:
    return str(text or "").strip().lower()


@lru_cache(maxsize=256)
def _lookup(key: str) -> RegionCenter:
    center = REGION_CENTERS.get(key)
    if center is None:
        logger.debug(f"Unknown region '{key}', using {DEFAULT_CENTER.label}")
        return DEFAULT_CENTER
    return center


def resolve_region(text) -> RegionCenter:
    """Resolve a region name to its center.

    Matching ignores case and surrounding whitespace. Empty or unknown
    names resolve to the default Alps center; this never fails.
    """
    return _lookup(normalize_region(text))


__all__ = ["REGION_CENTERS", "DEFAULT_CENTER", "normalize_region", "resolve_region"]
