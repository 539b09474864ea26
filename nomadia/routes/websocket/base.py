# nomadia/routes/websocket/base.py
"""Shared emit helpers for the route planner namespace."""

import logging
from flask import request
from flask_socketio import emit

from nomadia.routes.travel import route_response

logger = logging.getLogger(__name__)

NAMESPACE = "/nomadia/ws"

EMPTY_ROUTE = {"route": None, "map": None}


class BaseWebSocketHandler:
    """Base class for planner handlers bound to one namespace."""

    def __init__(self, socketio, namespace=NAMESPACE):
        self.socketio = socketio
        self.namespace = namespace

    def emit_to_client(self, event, data):
        emit(event, data, namespace=self.namespace)

    def emit_route(self, route):
        """Push a route and its map preview, or an empty result for None."""
        self.emit_to_client("route_generated", route_response(route) if route else EMPTY_ROUTE)

    def log_event(self, event_name, data=None):
        if data:
            logger.info(f"[WS] {event_name} - Client: {request.sid}, Data: {data}")
        else:
            logger.info(f"[WS] {event_name} - Client: {request.sid}")

    def handle_error(self, error, event_name=""):
        """Report a failed event to the client.

        Bad input (``ValueError``) is echoed back; anything else is logged
        with its traceback and reported as a server error.
        """
        if isinstance(error, ValueError):
            logger.info(f"[WS] Rejected {event_name} from {request.sid}: {error}")
            payload = {"message": str(error), "event": event_name, "kind": "client"}
        else:
            logger.error(f"[WS] Error in {event_name} - Client: {request.sid}", exc_info=error)
            payload = {"message": f"{event_name} failed", "event": event_name, "kind": "server"}
        self.emit_to_client("error", payload)
