"""Local JSON snapshot source (offline runs)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

from symbolgen.core.errors import FeedCorruptionError, FeedError
from symbolgen.core.logging import get_logger
from symbolgen.schemas.asset import Asset
from .base import BaseSource, parse_feed

log = get_logger("ingestion.file")


class JSONFileSource(BaseSource):
    """Reads a saved ticker payload: a JSON list of feed records."""

    name = "file"

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)

    async def fetch(self) -> List[Asset]:
        try:
            with self.file_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as exc:
            raise FeedError(f"Cannot read feed file {self.file_path}: {exc}") from exc
        except ValueError as exc:
            raise FeedCorruptionError(f"Feed file {self.file_path} is not valid JSON: {exc}") from exc

        assets = parse_feed(data)
        log.info(f"Loaded {len(assets)} records from {self.file_path}")
        return assets
