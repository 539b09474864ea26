# nomadia/routes/travel.py
"""Route planner HTTP endpoints and blueprint configuration."""

import logging
from flask import Blueprint, Response, jsonify, request

from nomadia.api.export import export_filename, export_text
from nomadia.api.regions import REGION_CENTERS
from nomadia.api.services.itinerary_service import ItineraryService
from nomadia.api.services.map_service import MapService

logger = logging.getLogger(__name__)

NO_ROUTE = {"error": "No route generated yet"}


def route_response(route):
    """Route snapshot plus its map preview, as sent to clients."""
    return {"route": route.to_dict(), "map": MapService.route_map(route)}


def create_travel_blueprint():
    """Create and configure the route planner blueprint.

    Returns:
        Configured Flask Blueprint
    """
    travel_bp = Blueprint("travel", __name__, url_prefix="/travel")

    @travel_bp.route("/api/route", methods=["GET", "POST"])
    def api_route():
        """Generate a new route or retrieve the current one."""
        if request.method == "POST":
            data = request.get_json(silent=True)
            try:
                route = ItineraryService.generate(data)
            except ValueError as e:
                return jsonify({"error": str(e)}), 400
            except Exception:
                logger.exception("Route generation failed")
                return jsonify({"error": "Route generation failed"}), 500
            return jsonify(route_response(route))

        route = ItineraryService.get_current()
        if route is None:
            return jsonify(NO_ROUTE), 404
        return jsonify(route_response(route))

    @travel_bp.route("/api/route/save", methods=["POST", "DELETE"])
    def api_save():
        """Save the current route, or forget the saved one."""
        if request.method == "DELETE":
            ItineraryService.clear_saved()
            return jsonify({"saved": False})

        route = ItineraryService.save_current()
        if route is None:
            return jsonify(NO_ROUTE), 404
        return jsonify({"saved": True, "title": route.title})

    @travel_bp.route("/api/route/share")
    def api_share():
        """Share text for the current route."""
        route = ItineraryService.get_current()
        if route is None:
            return jsonify(NO_ROUTE), 404
        return jsonify(ItineraryService.share_payload(route, request.host_url.rstrip("/") + "/travel/"))

    @travel_bp.route("/api/route/export")
    def api_export():
        """Download the current route as a text file."""
        route = ItineraryService.get_current()
        if route is None:
            return jsonify(NO_ROUTE), 404
        return Response(
            export_text(route),
            mimetype="text/plain",
            headers={"Content-Disposition": f'attachment; filename="{export_filename(route)}"'},
        )

    @travel_bp.route("/api/map")
    def api_map():
        """Bounding box and viewer URL for the current route."""
        route = ItineraryService.get_current()
        if route is None:
            return jsonify(NO_ROUTE), 404
        return jsonify(MapService.route_map(route))

    @travel_bp.route("/api/regions")
    def api_regions():
        """Known region names."""
        return jsonify({key: center.to_dict() for key, center in REGION_CENTERS.items()})

    @travel_bp.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok", "service": "nomadia"})

    return travel_bp


# Export for use in other modules
__all__ = ['create_travel_blueprint', 'route_response']
