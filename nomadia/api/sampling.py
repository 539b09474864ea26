# nomadia/api/sampling.py
"""Geodesic helpers and random waypoint sampling around a region center."""

from __future__ import annotations

import math
import random
from typing import Callable

from nomadia.api.models import GeoPoint, RegionCenter

# Zero-argument callable returning a uniform float in [0, 1).
RandomSource = Callable[[], float]

EARTH_RADIUS_KM = 6371.0
KM_PER_DEGREE = 111.0
BASE_RADIUS_KM = 30.0
CHALLENGE_RADIUS_KM = 50.0


def haversine_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in kilometres."""
    d_lat = math.radians(b.lat - a.lat)
    d_lon = math.radians(b.lon - a.lon)
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(h))


def challenge_radius_km(challenge: int) -> float:
    """Sampling radius for a challenge preference: 30 km at 0, 80 km at 100."""
    return BASE_RADIUS_KM + (challenge / 100) * CHALLENGE_RADIUS_KM


def sample_point(center: RegionCenter, radius_km: float,
                 rand: RandomSource = random.random) -> GeoPoint:
    """Draw a point uniformly over a disc of ``radius_km`` around ``center``.

    Two draws are taken from ``rand``: ``u`` for the radius and ``v`` for the
    angle. The square root on ``u`` keeps the density uniform per unit area.
    Longitude offsets are stretched by ``1 / cos(lat)``; polar regions are
    not supported.
    """
    u = rand()
    v = rand()
    w = radius_km / KM_PER_DEGREE * math.sqrt(u)
    t = 2 * math.pi * v
    lat = center.lat + w * math.cos(t)
    lon = center.lon + w * math.sin(t) / math.cos(math.radians(center.lat))
    return GeoPoint(lat, lon)


__all__ = [
    "RandomSource",
    "EARTH_RADIUS_KM",
    "haversine_km",
    "challenge_radius_km",
    "sample_point",
]
