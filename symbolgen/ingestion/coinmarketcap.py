"""CoinMarketCap ticker source implementation."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from symbolgen.core.errors import FeedCorruptionError, FeedError
from symbolgen.core.logging import get_logger
from symbolgen.schemas.asset import Asset
from .base import BaseSource, parse_feed

log = get_logger("ingestion.coinmarketcap")


class CoinMarketCapSource(BaseSource):
    """Fetches the full ticker list in a single request."""

    name = "coinmarketcap"

    def __init__(
        self,
        url: str,
        limit: int = 10000,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.limit = limit
        self.timeout = timeout
        self.transport = transport

    async def fetch(self) -> List[Asset]:
        params: Dict[str, Any] = {"limit": self.limit}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(self.url, params=params)
                resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise FeedError(f"Feed request to {self.url} failed: {exc}") from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise FeedCorruptionError(f"Feed at {self.url} is not valid JSON: {exc}") from exc

        assets = parse_feed(data)
        log.info(f"Fetched {len(assets)} records from CoinMarketCap")
        return assets
