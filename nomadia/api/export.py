# nomadia/api/export.py
"""Artifacts derived from a finished route: map bounds, text export, share text."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from nomadia.api.models import BoundingBox, GeoPoint, Route

BBOX_PAD_DEG = 0.2


def build_bbox(points: Sequence[GeoPoint]) -> Optional[BoundingBox]:
    """Bounding box around ``points`` padded by 0.2 degrees on every edge.

    Returns:
        BoundingBox or None for an empty sequence
    """
    if not points:
        return None

    lats = [p.lat for p in points]
    lons = [p.lon for p in points]
    return BoundingBox(
        min_lon=min(lons) - BBOX_PAD_DEG,
        min_lat=min(lats) - BBOX_PAD_DEG,
        max_lon=max(lons) + BBOX_PAD_DEG,
        max_lat=max(lats) + BBOX_PAD_DEG,
    )


def export_text(route: Route) -> str:
    """Plain-text itinerary, byte-for-byte reproducible for a given route."""
    summary = route.summary
    lines = [
        f"# {route.title}",
        f"Region: {route.meta.region}",
        f"Style: {route.meta.style}",
        f"Summary: {summary.total_distance_km} km • {summary.total_time_hrs} hrs"
        f" • ~${summary.estimated_cost_usd}",
        "",
    ]
    for day in route.days:
        lines.append(f"Day {day.day} - {day.distance_km} km (~{day.time_hrs} hrs)")
        lines.append(f"  {day.description}")
        lines.append(f"  Sleep: {day.sleep}")
        lines.append(f"  Coords: {day.coord.lat:.4f}, {day.coord.lon:.4f}")
        lines.append("")
    return "\n".join(lines)


def export_filename(route: Route) -> str:
    """File name for the text export, e.g. ``5-day-europe-backpack-adventure.txt``."""
    slug = re.sub(r"\s+", "-", route.title).lower()
    return f"{slug}.txt"


def share_text(route: Route) -> str:
    return (
        f"{route.title}\n"
        f"Distance: {route.summary.total_distance_km} km\n"
        f"Days: {route.meta.days}"
    )


__all__ = ["build_bbox", "export_text", "export_filename", "share_text", "BBOX_PAD_DEG"]
