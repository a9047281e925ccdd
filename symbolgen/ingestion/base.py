"""Abstract source interface for the market feed."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List

from pydantic import TypeAdapter, ValidationError

from symbolgen.core.errors import FeedCorruptionError
from symbolgen.schemas.asset import Asset

_feed_adapter = TypeAdapter(List[Asset])


def parse_feed(data: Any) -> List[Asset]:
    """Validate a decoded feed payload. All records are accepted or none are."""
    if not isinstance(data, list):
        raise FeedCorruptionError(f"Feed must be a JSON list, got {type(data).__name__}")
    try:
        return _feed_adapter.validate_python(data)
    except ValidationError as exc:
        raise FeedCorruptionError(f"Invalid feed record: {exc}") from exc


class BaseSource(ABC):
    """Abstract base class for feed sources."""

    name: str

    @abstractmethod
    async def fetch(self) -> List[Asset]:
        """Fetch the whole feed in feed order."""
