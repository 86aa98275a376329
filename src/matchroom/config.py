"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

VERSION = "1.0.0"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Settings
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 5000

    # CORS - comma-separated origins (env var: CORS_ORIGINS)
    cors_origins: str = "*"

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Room
    room_name: str = "🎮 RHL TOURNAMENT 🎮"
    max_players: int = 16
    command_prefix: str = "!"

    # Owner authentication (env var: OWNER_PASSWORD)
    owner_password: str = "change-me"

    # Discord
    discord_webhook_url: str = ""
    discord_server_invite: str = "https://discord.gg/R3Rtwqqhwm"
    notification_queue_size: int = 100
    webhook_cooldown_seconds: float = 1.0
    webhook_timeout_seconds: float = 10.0
    # Forward plain chat messages to the webhook
    log_chat_to_discord: bool = False

    # Background timers
    reminder_interval_seconds: float = 180.0
    auto_join_interval_seconds: float = 1.0
    liveness_interval_seconds: float = 30.0
    ready_countdown_seconds: float = 3.0

    # Goal attribution
    touch_history_capacity: int = 10
    touch_window_ms: int = 5000
    # Touches survive game start/stop unless this is enabled
    reset_touches_on_game_start: bool = False

    # Match diagnostics (JSON timeline per match)
    match_diagnostics: bool = False
    match_log_dir: str = "logs/matches"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
