# nomadia/routes/websocket/planner.py
"""WebSocket handlers for route generation."""

import logging

from .base import BaseWebSocketHandler
from nomadia.api.services.itinerary_service import ItineraryService

logger = logging.getLogger(__name__)


class PlannerHandler(BaseWebSocketHandler):
    """Generates routes on request and pushes them to the client."""

    def register_handlers(self):
        """Register planner event handlers."""

        @self.socketio.on("generate_route", namespace=self.namespace)
        def handle_generate_route(data=None):
            """Generate a route and store it as the session's current route."""
            self.log_event("generate_route", data)
            try:
                route = ItineraryService.generate(data)
            except Exception as exc:
                self.handle_error(exc, "generate_route")
                return
            self.emit_route(route)

        @self.socketio.on("get_route", namespace=self.namespace)
        def handle_get_route(data=None):
            """Send the current (or last saved) route back to the client."""
            self.emit_route(ItineraryService.get_current())
