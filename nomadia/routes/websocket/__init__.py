# nomadia/routes/websocket/__init__.py
"""WebSocket route handlers initialization."""

import logging

from .connection import ConnectionHandler
from .planner import PlannerHandler
from .base import NAMESPACE

logger = logging.getLogger(__name__)


def register_websocket_handlers(socketio, namespace=NAMESPACE):
    """Register all WebSocket event handlers with SocketIO.

    Args:
        socketio: Flask-SocketIO instance
        namespace: Socket.IO namespace to register under
    """
    logger.info(f"Registering WebSocket handlers for namespace: {namespace}")

    try:
        ConnectionHandler(socketio, namespace).register_handlers()
        PlannerHandler(socketio, namespace).register_handlers()
    except Exception as e:
        logger.error(f"Failed to register WebSocket handlers: {e}")
        logger.exception("WebSocket registration error:")
        raise

    logger.info("WebSocket handlers registered successfully")


__all__ = ['register_websocket_handlers', 'NAMESPACE']
