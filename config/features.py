"""
Feature Flags - Easy on/off toggle for features.
Change values here to enable/disable functionality.
"""

import os


class Features:
    """Feature toggles - set via env vars or defaults"""

    # === MAP ===
    # In-chat map: one venue pin per stadium with coordinates
    MAP_PINS_ENABLED: bool = os.getenv("MAP_PINS_ENABLED", "true").lower() == "true"
    MAX_MAP_PINS: int = int(os.getenv("MAX_MAP_PINS", "25"))
    # Browser map served by the aiohttp app (needs PUBLIC_BASE_URL for links)
    WEB_MAP_ENABLED: bool = os.getenv("WEB_MAP_ENABLED", "true").lower() == "true"

    # === SESSIONS ===
    # Keep auth tokens on disk so users stay logged in across restarts
    PERSIST_SESSIONS: bool = os.getenv("PERSIST_SESSIONS", "true").lower() == "true"

    # === DEBUG ===
    DEBUG_MODE: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def to_dict(cls) -> dict:
        """Get all features as dict (useful for logging)"""
        return {
            "map_pins_enabled": cls.MAP_PINS_ENABLED,
            "max_map_pins": cls.MAX_MAP_PINS,
            "web_map_enabled": cls.WEB_MAP_ENABLED,
            "persist_sessions": cls.PERSIST_SESSIONS,
            "debug_mode": cls.DEBUG_MODE,
        }


# Shortcut
features = Features()
