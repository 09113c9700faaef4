"""Application configuration."""
from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ordergen.services.ordering.ids import IdMode


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Transport
    websocket_url: str = "wss://localhost:7121/wss/orders"
    ssl_verify: bool = True
    open_timeout: Optional[float] = 10.0

    # Operator console
    interactive: bool = True
    user_id: Optional[int] = None

    # Generation
    id_mode: IdMode = IdMode.COUNTER
    catalog_file: Optional[str] = None
    faker_locale: str = "en_US"

    # Dispatch timing (seconds)
    min_send_delay: float = 3.0
    max_send_delay: float = 8.0
    idle_poll_interval: float = 0.5

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def check_delays(self) -> "Settings":
        """Reject delay windows the dispatch loop cannot sample from."""
        if self.min_send_delay <= 0 or self.idle_poll_interval <= 0:
            raise ValueError("send delays and idle poll interval must be positive")
        if self.max_send_delay < self.min_send_delay:
            raise ValueError("max_send_delay must be >= min_send_delay")
        return self


settings = Settings()
