"""
Nomadia – main application entry point

* Flask app + Socket.IO serving the route generator over HTTP and WebSocket.
* The HTTP API lives under `/travel/api/...`; the Socket.IO namespace is
  `/nomadia/ws`.
"""

import logging

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO

from nomadia.api.config import get_log_level, get_port, get_secret_key, get_websocket_config

# --------------------------------------------------------------------------- #
# Logging
# --------------------------------------------------------------------------- #
logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Flask initialisation
# --------------------------------------------------------------------------- #
app = Flask(__name__)
app.secret_key = get_secret_key()

app.config.update(
    SESSION_COOKIE_SECURE=False,
    SESSION_COOKIE_HTTPONLY=True,
    SESSION_COOKIE_SAMESITE="Lax",
    PERMANENT_SESSION_LIFETIME=86400,
)

# CORS for local dev / cross‑origin front‑end requests
CORS(app, origins="*", supports_credentials=True)

# --------------------------------------------------------------------------- #
# Socket.IO
# --------------------------------------------------------------------------- #
ws_config = get_websocket_config()
socketio = SocketIO(
    app,
    cors_allowed_origins=ws_config["cors_allowed_origins"],
    ping_interval=ws_config["ping_interval"],
    ping_timeout=ws_config["ping_timeout"],
    async_mode="threading",
    logger=False,
    engineio_logger=False,
)
logger.info("Socket.IO initialised (async_mode=threading)")

# --------------------------------------------------------------------------- #
# Blueprints & WebSocket handlers
# --------------------------------------------------------------------------- #
from nomadia.routes.travel import create_travel_blueprint  # noqa: E402
from nomadia.routes.websocket import NAMESPACE, register_websocket_handlers  # noqa: E402

app.register_blueprint(create_travel_blueprint())
register_websocket_handlers(socketio)


@app.route("/debug")
def debug():
    """Simple JSON health endpoint."""
    return {
        "status": "ok",
        "socketio_initialized": True,
        "endpoints": {
            "generate": "/travel/api/route",
            "websocket_namespace": NAMESPACE,
        },
    }


# --------------------------------------------------------------------------- #
# Local development runner ( `python main.py` )
# --------------------------------------------------------------------------- #
if __name__ == "__main__":
    port = get_port()
    logger.info("Starting Nomadia on http://localhost:%d", port)
    socketio.run(app, host="0.0.0.0", port=port, debug=False, allow_unsafe_werkzeug=True)

__all__ = ["app", "socketio"]
