"""Nomadia – procedural multi-day adventure route planner."""

from nomadia.api.generator import generate_route
from nomadia.api.models import PreferenceSet, Route, TripRequest

__version__ = "0.1.0"

__all__ = ["generate_route", "PreferenceSet", "Route", "TripRequest"]
