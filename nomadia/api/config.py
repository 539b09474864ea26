# nomadia/api/config.py
"""Configuration management for the Nomadia route planner."""
import logging
import os
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Key the last saved route is stored under in the user's session.
ROUTE_STORAGE_KEY = "nomadia_last_route"


def get_port():
    """Get port configuration."""
    return int(os.getenv("PORT", 5000))


def get_log_level():
    """Get logging level name, falling back to INFO for unknown names."""
    level = os.getenv("NOMADIA_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"Unknown NOMADIA_LOG_LEVEL '{level}', using INFO")
        return "INFO"
    return level


def get_secret_key():
    """Get the Flask secret key, generating a temporary one if unset."""
    secret = os.getenv("FLASK_SECRET_KEY")
    if not secret:
        logger.warning("No FLASK_SECRET_KEY found. Generated a temporary key.")
        secret = os.urandom(32).hex()
    return secret


def get_share_base_url():
    """Public page URL appended to share text; empty means use the request URL."""
    return os.getenv("NOMADIA_SHARE_URL", "")


def get_map_config():
    """Get map viewer configuration."""
    return {
        "embed_url": os.getenv(
            "NOMADIA_MAP_EMBED_URL", "https://www.openstreetmap.org/export/embed.html"
        ),
        "layer": os.getenv("NOMADIA_MAP_LAYER", "mapnik"),
    }


def get_websocket_config():
    """Get WebSocket configuration."""
    return {
        "ping_interval": int(os.getenv("WEBSOCKET_PING_INTERVAL", "25")),
        "ping_timeout": int(os.getenv("WEBSOCKET_PING_TIMEOUT", "60")),
        "cors_allowed_origins": os.getenv("WEBSOCKET_CORS_ORIGINS", "*").split(","),
    }
