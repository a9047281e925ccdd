import os

# Keep test runs from creating a logs/ directory in the working tree
os.environ.setdefault("LOG_DIR", "")

import pytest
from loguru import logger

from symbolgen.schemas.asset import Asset


@pytest.fixture
def log_messages():
    """Collect every loguru message emitted during the test"""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def make_asset():
    """Build an asset that passes every filter rule unless told otherwise"""

    def _make(symbol: str, volume: str | None = "500000.0", name: str | None = None) -> Asset:
        return Asset(symbol=symbol, name=name or f"{symbol} coin", daily_volume_usd=volume)

    return _make


@pytest.fixture
def feed_record():
    """Build a raw feed record as the ticker endpoint sends it"""

    def _record(symbol: str, volume: str | None = "500000.0", name: str | None = None) -> dict:
        return {
            "id": symbol.lower(),
            "name": name or f"{symbol} coin",
            "symbol": symbol,
            "rank": "1",
            "price_usd": "1.0",
            "price_btc": "0.0001",
            "24h_volume_usd": volume,
            "market_cap_usd": "1000000.0",
            "available_supply": "1000000.0",
            "total_supply": "1000000.0",
            "percent_change_1h": "0.1",
            "percent_change_24h": "-1.2",
            "percent_change_7d": "3.4",
            "last_updated": "1514764800",
        }

    return _record
