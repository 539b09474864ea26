"""Shared data structures for route generation.

Every value here is immutable once built. A ``Route`` owns its ``points`` and
``days`` tuples, so a new generation never aliases the data of a previous one.
``to_dict`` / ``from_dict`` give the JSON-friendly snapshot used by the
persistence and HTTP layers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

PREFERENCE_KEYS: Tuple[str, ...] = ("nature", "culture", "people", "remote", "challenge")
STYLES: Tuple[str, ...] = ("backpack", "mixed", "public")

DEFAULT_DAYS = 5
MIN_DAYS = 2
MAX_DAYS = 30
DEFAULT_STYLE = "backpack"
DEFAULT_PREFERENCES: Dict[str, int] = {
    "nature": 80,
    "culture": 60,
    "people": 50,
    "remote": 50,
    "challenge": 40,
}


def _coerce_int(value: Any) -> Optional[int]:
    """Best-effort numeric coercion; ``None`` when the value isn't a number."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return int(math.floor(number + 0.5))


def clamp_days(value: Any) -> int:
    """Clamp a requested day count into [2, 30].

    Non-numeric values fall back to the default of 5 first.
    """
    days = _coerce_int(value)
    if days is None:
        days = DEFAULT_DAYS
    return max(MIN_DAYS, min(MAX_DAYS, days))


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in degrees."""

    lat: float
    lon: float

    def __post_init__(self):
        if not (math.isfinite(self.lat) and math.isfinite(self.lon)):
            raise ValueError("lat and lon must be finite")

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lon": self.lon}


@dataclass(frozen=True)
class RegionCenter:
    """Named anchor coordinate that daily points are scattered around."""

    lat: float
    lon: float
    label: str

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lon)

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lon": self.lon, "label": self.label}


@dataclass(frozen=True)
class PreferenceSet:
    """The five 0-100 preference sliders."""

    nature: int = DEFAULT_PREFERENCES["nature"]
    culture: int = DEFAULT_PREFERENCES["culture"]
    people: int = DEFAULT_PREFERENCES["people"]
    remote: int = DEFAULT_PREFERENCES["remote"]
    challenge: int = DEFAULT_PREFERENCES["challenge"]

    def __post_init__(self):
        for key in PREFERENCE_KEYS:
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"preference '{key}' must be an integer")
            if not 0 <= value <= 100:
                raise ValueError(f"preference '{key}' must be between 0 and 100")

    @classmethod
    def from_payload(cls, payload: Any) -> "PreferenceSet":
        """Build preferences from loose input, clamping values into range."""
        payload = payload if isinstance(payload, Mapping) else {}
        values = {}
        for key in PREFERENCE_KEYS:
            number = _coerce_int(payload.get(key))
            if number is None:
                number = DEFAULT_PREFERENCES[key]
            values[key] = max(0, min(100, number))
        return cls(**values)

    def to_dict(self) -> Dict[str, int]:
        return {key: getattr(self, key) for key in PREFERENCE_KEYS}


@dataclass(frozen=True)
class TripRequest:
    """Everything the generator needs for one route."""

    days: int = DEFAULT_DAYS
    region: str = ""
    style: str = DEFAULT_STYLE
    prefs: PreferenceSet = field(default_factory=PreferenceSet)

    @classmethod
    def from_payload(cls, payload: Any) -> "TripRequest":
        """Coerce an untrusted JSON body into a request.

        Day counts are clamped, unknown styles become ``backpack`` and
        missing preferences take the slider defaults. Only a body that is
        not a JSON object is rejected.
        """
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError("Request body must be a JSON object")

        region = payload.get("region")
        style = str(payload.get("style") or "").strip().lower()
        return cls(
            days=clamp_days(payload.get("days")),
            region="" if region is None else str(region),
            style=style if style in STYLES else DEFAULT_STYLE,
            prefs=PreferenceSet.from_payload(payload.get("prefs")),
        )


@dataclass(frozen=True)
class DayPlan:
    day: int
    coord: GeoPoint
    distance_km: int
    time_hrs: int
    description: str
    sleep: str

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "coord": self.coord.to_dict(),
            "distanceKm": self.distance_km,
            "timeHrs": self.time_hrs,
            "description": self.description,
            "sleep": self.sleep,
        }


@dataclass(frozen=True)
class RouteSummary:
    total_distance_km: int
    total_time_hrs: int
    estimated_cost_usd: int

    def to_dict(self) -> dict:
        return {
            "totalDistanceKm": self.total_distance_km,
            "totalTimeHrs": self.total_time_hrs,
            "estimatedCostUSD": self.estimated_cost_usd,
        }


@dataclass(frozen=True)
class RouteMeta:
    days: int
    region: str
    style: str
    prefs: PreferenceSet

    def to_dict(self) -> dict:
        return {
            "days": self.days,
            "region": self.region,
            "style": self.style,
            "prefs": self.prefs.to_dict(),
        }


@dataclass(frozen=True)
class Route:
    """A finished multi-day itinerary."""

    title: str
    meta: RouteMeta
    points: Tuple[GeoPoint, ...]
    summary: RouteSummary
    days: Tuple[DayPlan, ...]

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "meta": self.meta.to_dict(),
            "points": [
                {**p.to_dict(), "name": f"Day {i + 1}"} for i, p in enumerate(self.points)
            ],
            "summary": self.summary.to_dict(),
            "days": [d.to_dict() for d in self.days],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Route":
        """Rebuild a route from a snapshot produced by ``to_dict``.

        Raises:
            ValueError: If the snapshot is missing fields or has bad values
        """
        try:
            meta = data["meta"]
            summary = data["summary"]
            return cls(
                title=str(data["title"]),
                meta=RouteMeta(
                    days=int(meta["days"]),
                    region=str(meta["region"]),
                    style=str(meta["style"]),
                    prefs=PreferenceSet(**{k: int(meta["prefs"][k]) for k in PREFERENCE_KEYS}),
                ),
                points=tuple(GeoPoint(float(p["lat"]), float(p["lon"])) for p in data["points"]),
                summary=RouteSummary(
                    total_distance_km=int(summary["totalDistanceKm"]),
                    total_time_hrs=int(summary["totalTimeHrs"]),
                    estimated_cost_usd=int(summary["estimatedCostUSD"]),
                ),
                days=tuple(
                    DayPlan(
                        day=int(d["day"]),
                        coord=GeoPoint(float(d["coord"]["lat"]), float(d["coord"]["lon"])),
                        distance_km=int(d["distanceKm"]),
                        time_hrs=int(d["timeHrs"]),
                        description=str(d["description"]),
                        sleep=str(d["sleep"]),
                    )
                    for d in data["days"]
                ),
            )
        except (KeyError, TypeError, AttributeError, OverflowError) as exc:
            raise ValueError(f"Malformed route snapshot: {exc}") from exc


@dataclass(frozen=True)
class BoundingBox:
    """Padded lat/lon rectangle enclosing a route."""

    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float

    def formatted(self) -> Tuple[str, str, str, str]:
        """Bounds as 4-decimal strings in ``minLon, minLat, maxLon, maxLat`` order."""
        return tuple(f"{v:.4f}" for v in (self.min_lon, self.min_lat, self.max_lon, self.max_lat))

    def to_dict(self) -> dict:
        min_lon, min_lat, max_lon, max_lat = self.formatted()
        return {"minLon": min_lon, "minLat": min_lat, "maxLon": max_lon, "maxLat": max_lat}
