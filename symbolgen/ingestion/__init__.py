from symbolgen.ingestion.base import BaseSource, parse_feed
from symbolgen.ingestion.coinmarketcap import CoinMarketCapSource
from symbolgen.ingestion.file_source import JSONFileSource

__all__ = [
    "BaseSource",
    "parse_feed",
    "CoinMarketCapSource",
    "JSONFileSource",
]
