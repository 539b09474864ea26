"""Procedural route generation.

Turns a ``TripRequest`` into a ``Route``: one waypoint per day scattered
around the region center, day legs converted into plausible hiking
distances, and a summary with time and cost estimates.

Each day's point is sampled independently around the same center, so the
waypoints are a scattered set rather than a connected walk.
"""

from __future__ import annotations

import logging
import math
import random
from typing import List

from nomadia.api.models import (
    DayPlan,
    GeoPoint,
    Route,
    RouteMeta,
    RouteSummary,
    TripRequest,
    clamp_days,
)
from nomadia.api.regions import resolve_region
from nomadia.api.sampling import RandomSource, challenge_radius_km, haversine_km, sample_point

logger = logging.getLogger(__name__)

WALKING_PACE_KMH = 4.5
MIN_LEG_KM = 6
MAX_LEG_KM = 28
LEG_BASE_KM = 8
MIN_DAY_HOURS = 3

COST_PER_DAY_USD = {"backpack": 20, "mixed": 30, "public": 25}
DEFAULT_COST_PER_DAY_USD = 20
ZERO_DISTANCE_COST_PER_DAY_USD = 25

NATURE_THRESHOLD = 60
NATURE_DESCRIPTION = "Forest paths, lakes and viewpoints with small village stops."
CULTURE_DESCRIPTION = "Local markets, heritage streets, and scenic countryside walks."

SLEEP_OPTIONS = (
    "Wild camping near a lake",
    "Forest campsite",
    "Friendly hostel dorm",
    "Volunteering at an eco-farm",
    "Community homestay",
)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def leg_distance_km(prev: GeoPoint, point: GeoPoint, challenge: int, first: bool = False) -> float:
    """Daily walking distance for one leg, clamped to [6, 28] km.

    The first day has no previous point, so its raw distance is zero.
    Challenge shifts the result by up to +/-5 km around challenge=50.
    """
    raw = 0.0 if first else haversine_km(prev, point)
    return max(MIN_LEG_KM, min(MAX_LEG_KM, raw + LEG_BASE_KM + (challenge - 50) / 10))


def day_hours(distance_km: float) -> int:
    return max(MIN_DAY_HOURS, round_half_up(distance_km / WALKING_PACE_KMH))


def sleep_option(day_index: int, style: str) -> str:
    offset = 1 if style == "mixed" else 0
    return SLEEP_OPTIONS[(day_index + offset) % len(SLEEP_OPTIONS)]


def estimate_cost(days: int, style: str, total_distance_km: int) -> int:
    if not total_distance_km:
        return days * ZERO_DISTANCE_COST_PER_DAY_USD
    return days * COST_PER_DAY_USD.get(style, DEFAULT_COST_PER_DAY_USD)


def generate_route(request: TripRequest, rand: RandomSource = random.random) -> Route:
    """Generate a complete route for ``request``.

    Args:
        request: Trip parameters; the day count is clamped to [2, 30]
        rand: Uniform [0, 1) source used for waypoint sampling

    Returns:
        A new, fully populated Route
    """
    n = clamp_days(request.days)
    center = resolve_region(request.region)
    prefs = request.prefs
    radius_km = challenge_radius_km(prefs.challenge)

    logger.debug(
        "Generating route: days=%d region=%s style=%s radius=%.1fkm",
        n, center.label, request.style, radius_km,
    )

    points = tuple(sample_point(center, radius_km, rand) for _ in range(n))

    legs: List[float] = [
        leg_distance_km(points[i - 1] if i else p, p, prefs.challenge, first=(i == 0))
        for i, p in enumerate(points)
    ]

    total_distance = round_half_up(sum(legs))
    # Derived from the rounded total, not from the per-day hours.
    total_time = round_half_up(total_distance / WALKING_PACE_KMH)

    description = NATURE_DESCRIPTION if prefs.nature > NATURE_THRESHOLD else CULTURE_DESCRIPTION

    days = tuple(
        DayPlan(
            day=i + 1,
            coord=p,
            distance_km=round_half_up(legs[i]),
            time_hrs=day_hours(legs[i]),
            description=description,
            sleep=sleep_option(i, request.style),
        )
        for i, p in enumerate(points)
    )

    return Route(
        title=f"{n}-day {center.label} {request.style} adventure",
        meta=RouteMeta(days=n, region=center.label, style=request.style, prefs=prefs),
        points=points,
        summary=RouteSummary(
            total_distance_km=total_distance,
            total_time_hrs=total_time,
            estimated_cost_usd=estimate_cost(n, request.style, total_distance),
        ),
        days=days,
    )


__all__ = ["generate_route", "leg_distance_km", "estimate_cost", "SLEEP_OPTIONS"]
