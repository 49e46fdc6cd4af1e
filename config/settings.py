from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import Optional


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Telegram
    telegram_bot_token: str = ""

    # Supabase (anon key: row-level security scopes rows to the signed-in user)
    supabase_url: str = ""
    supabase_key: str = ""
    db_schema: str = "public"

    # Sessions
    session_dir: Path = Path("sessions")

    # Reference data
    arenas_path: Optional[Path] = None

    # Web (Leaflet map page + health check)
    port: int = 8080
    public_base_url: str = ""

    # Environment
    env: str = "development"
    debug: bool = False

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # SUPABASE_URL == supabase_url
    )

    def map_url(self, token: str) -> Optional[str]:
        """Public URL of a session's web map, None when no public URL is configured"""
        if not self.public_base_url:
            return None
        return f"{self.public_base_url.rstrip('/')}/map/{token}"


# Create settings instance
settings = Settings()
