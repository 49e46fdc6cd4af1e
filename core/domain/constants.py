"""
Domain constants - table names, limits and other static values.
Centralized here for easy modification.
"""

# === Tables ===
USERS_TABLE = "users"
STADIUMS_TABLE = "stadiums"

# === Reference lookup ===
ARENA_SEARCH_LIMIT = 15

# === Profile / stats ===
RECENT_STADIUMS_LIMIT = 6

# === Population ===
# Re-fetch attempts when a local write lands while the cache is being rebuilt
MAX_POPULATION_ATTEMPTS = 3

# === Map ===
MAP_DEFAULT_CENTER = (37.8, -96.0)
MAP_DEFAULT_ZOOM = 4
MAP_MAX_ZOOM = 18
MAP_TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
LEAFLET_VERSION = "1.9.4"

# === Auth ===
MIN_USERNAME_LENGTH = 2
MAX_USERNAME_LENGTH = 50
MIN_PASSWORD_LENGTH = 6

# === Form ===
REQUIRED_STADIUM_FIELDS = ("name", "city", "sport")
MAX_FIELD_LENGTH = 100

SPORT_EMOJI = {
    "mlb": "⚾",
    "baseball": "⚾",
    "nfl": "🏈",
    "football": "🏈",
    "nba": "🏀",
    "basketball": "🏀",
    "nhl": "🏒",
    "hockey": "🏒",
    "soccer": "⚽",
    "mls": "⚽",
}


def get_sport_emoji(sport: str) -> str:
    """Get display emoji for a free-text sport label"""
    return SPORT_EMOJI.get(sport.strip().lower(), "🏟")
