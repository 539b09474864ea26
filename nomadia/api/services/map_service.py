# nomadia/api/services/map_service.py
"""Service layer for map preview operations."""

import logging
from typing import Dict, Any, Optional

from nomadia.api.config import get_map_config
from nomadia.api.export import build_bbox
from nomadia.api.models import BoundingBox, Route

logger = logging.getLogger(__name__)


class MapService:
    """Builds map viewer data from generated routes."""

    @staticmethod
    def validate_coordinates(lat: float, lon: float) -> bool:
        """Validate that coordinates are within valid ranges.

        Args:
            lat: Latitude
            lon: Longitude

        Returns:
            True if valid, False otherwise
        """
        return -90 <= lat <= 90 and -180 <= lon <= 180

    @staticmethod
    def embed_url(bbox: Optional[BoundingBox]) -> Optional[str]:
        """Format a bounding box into a tile-server embed URL.

        Args:
            bbox: Padded route bounds, or None

        Returns:
            Viewer URL or None when there is nothing to frame
        """
        if bbox is None:
            return None
        config = get_map_config()
        return f"{config['embed_url']}?bbox={','.join(bbox.formatted())}&layer={config['layer']}"

    @staticmethod
    def route_map(route: Optional[Route]) -> Dict[str, Any]:
        """Bounds and viewer URL for a route's waypoints.

        Args:
            route: Generated route, or None

        Returns:
            Dictionary with ``bbox`` and ``url`` (both None without points)
        """
        if route is None:
            return {"bbox": None, "url": None}

        outside = [p for p in route.points if not MapService.validate_coordinates(p.lat, p.lon)]
        if outside:
            logger.warning(f"{len(outside)} waypoint(s) of '{route.title}' fall outside valid ranges")

        bbox = build_bbox(route.points)
        return {
            "bbox": bbox.to_dict() if bbox else None,
            "url": MapService.embed_url(bbox),
        }


# Export for use in other modules
__all__ = ['MapService']
