from pathlib import Path
from typing import Dict, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent

# Identifiers 0..2 belong to these, in this order. They never come from the feed.
BASE_CURRENCIES = ("EUR", "USD", "BTC")


class Settings(BaseSettings):
    # Environment mode: dev or prod
    ENV: Literal["dev", "prod"] = "dev"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"  # empty string disables the file sink
    SLACK_WEBHOOK_URL: str | None = None

    # Market feed
    FEED_URL: str = "https://api.coinmarketcap.com/v1/ticker/"
    FEED_LIMIT: int = 10000
    FEED_TIMEOUT_SECONDS: float = 30.0

    # Filtering
    MIN_DAILY_VOLUME_USD: float = 100_000.0

    # Size of the low identifier range held by BASE_CURRENCIES
    RESERVED_IDENTIFIERS: int = Field(default=len(BASE_CURRENCIES), ge=len(BASE_CURRENCIES))

    # Persisted symbol -> identifier mapping
    MAPPING_PATH: str = "data/coins.json"

    # Generated artifacts: template name -> destination file
    TEMPLATES_DIR: str = str(PACKAGE_DIR / "templates")
    OUTPUTS: Dict[str, str] = {
        "symbols.rs.j2": "market/src/symbols.rs",
        "symbols.ts.j2": "market-ts/src/symbols.ts",
    }

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # ignore unrelated keys in local .env
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENV == "prod"

    @property
    def effective_log_level(self) -> str:
        """Return appropriate log level based on environment."""
        if self.is_production:
            # In production, minimum INFO level (ignore DEBUG)
            return self.LOG_LEVEL if self.LOG_LEVEL.upper() != "DEBUG" else "INFO"
        return self.LOG_LEVEL


settings = Settings()
