"""Market feed asset schema.

Field names follow the CoinMarketCap v1 ticker payload. Decimal values are
kept as text exactly as the feed sent them; nothing here does arithmetic on
prices or supplies, and rendering must not lose precision.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Asset(BaseModel):
    """One tradeable asset from the feed, plus the identifier assigned to it."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: str = ""
    symbol: str
    rank: Optional[str] = None
    price_usd: Optional[str] = None
    price_btc: Optional[str] = None
    daily_volume_usd: Optional[str] = Field(default=None, alias="24h_volume_usd")
    market_cap_usd: Optional[str] = None
    available_supply: Optional[str] = None
    total_supply: Optional[str] = None
    percent_change_1h: Optional[str] = None
    percent_change_24h: Optional[str] = None
    percent_change_7d: Optional[str] = None
    last_updated: Optional[str] = None

    # Set by the assignment engine, never read from the feed
    num: Optional[int] = Field(default=None, exclude=True)

    @field_validator(
        "rank",
        "price_usd",
        "price_btc",
        "daily_volume_usd",
        "market_cap_usd",
        "available_supply",
        "total_supply",
        "percent_change_1h",
        "percent_change_24h",
        "percent_change_7d",
        "last_updated",
        mode="before",
    )
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        # Some mirrors of the feed send bare JSON numbers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value


# Manually curated assets that are always part of the table, whatever the feed says.
CURATED_ASSETS = [
    Asset(symbol="NZDT", name="Cryptopia coin"),
]
