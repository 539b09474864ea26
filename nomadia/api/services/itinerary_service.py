# nomadia/api/services/itinerary_service.py
"""Service layer for route generation and session persistence."""

import json
import logging
from typing import Dict, Any, Optional
from flask import session

from nomadia.api.config import ROUTE_STORAGE_KEY, get_share_base_url
from nomadia.api.export import share_text
from nomadia.api.generator import generate_route
from nomadia.api.models import Route, TripRequest

logger = logging.getLogger(__name__)

CURRENT_ROUTE_KEY = 'current_route'


def _dump(route: Route) -> str:
    return json.dumps(route.to_dict(), separators=(',', ':'))


def _load(raw: Any, key: str) -> Optional[Route]:
    """Parse a stored snapshot, treating anything unreadable as absent."""
    if not raw:
        return None
    try:
        data = json.loads(raw) if isinstance(raw, str) else raw
        return Route.from_dict(data)
    except (TypeError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        logger.warning(f"Ignoring unreadable route snapshot under '{key}': {e}")
        return None


class ItineraryService:
    """Handles route generation and session management."""

    @staticmethod
    def generate(payload: Any) -> Route:
        """Generate a new route from a request body and make it current.

        Args:
            payload: JSON body with days, region, style and prefs

        Returns:
            Generated route

        Raises:
            ValueError: If the body is not a JSON object
        """
        request = TripRequest.from_payload(payload)
        route = generate_route(request)
        logger.info(f"Generated '{route.title}' ({route.summary.total_distance_km} km)")

        ItineraryService.store_current(route)
        return route

    @staticmethod
    def store_current(route: Route) -> None:
        """Replace the current route in the Flask session.

        Args:
            route: Route to keep as current
        """
        session[CURRENT_ROUTE_KEY] = _dump(route)
        session.modified = True
        logger.debug(f"Stored current route '{route.title}' in session")

    @staticmethod
    def get_current() -> Optional[Route]:
        """Get the current route, falling back to the saved one.

        Returns:
            Route or None if neither exists
        """
        route = _load(session.get(CURRENT_ROUTE_KEY), CURRENT_ROUTE_KEY)
        if route is None:
            route = ItineraryService.load_saved()
        return route

    @staticmethod
    def save_current() -> Optional[Route]:
        """Persist the current route under the fixed storage key.

        Returns:
            The saved route, or None if there was nothing to save
        """
        route = _load(session.get(CURRENT_ROUTE_KEY), CURRENT_ROUTE_KEY)
        if route is None:
            return None
        session[ROUTE_STORAGE_KEY] = _dump(route)
        session.modified = True
        logger.info(f"Saved route '{route.title}'")
        return route

    @staticmethod
    def load_saved() -> Optional[Route]:
        """Load the last saved route.

        Returns:
            Route or None if nothing valid was saved
        """
        return _load(session.get(ROUTE_STORAGE_KEY), ROUTE_STORAGE_KEY)

    @staticmethod
    def clear_saved() -> None:
        """Forget the saved route."""
        session.pop(ROUTE_STORAGE_KEY, None)
        session.modified = True
        logger.debug("Cleared saved route from session")

    @staticmethod
    def share_payload(route: Route, page_url: str = "") -> Dict[str, str]:
        """Build share data for a native share sheet or clipboard copy.

        Args:
            route: Route to share
            page_url: URL of the page being shared, used when no public
                share URL is configured

        Returns:
            Dictionary with title, text, url and clipboard string
        """
        text = share_text(route)
        url = get_share_base_url() or page_url
        return {
            'title': route.title,
            'text': text,
            'url': url,
            'clipboard': f"{text}\n{url}",
        }


__all__ = ['ItineraryService', 'CURRENT_ROUTE_KEY']
