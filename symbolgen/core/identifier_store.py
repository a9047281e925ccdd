"""Persisted symbol -> identifier mapping"""

import json
import os
from pathlib import Path
from typing import Dict

from pydantic import NonNegativeInt, TypeAdapter, ValidationError

from symbolgen.core.config import BASE_CURRENCIES
from symbolgen.core.errors import MappingStoreError
from symbolgen.core.logging import get_logger

log = get_logger("identifier_store")

_mapping_adapter = TypeAdapter(Dict[str, NonNegativeInt])


class IdentifierStore:
    """Loads and rewrites the JSON file holding every identifier ever handed out"""

    def __init__(self, path: str | Path, reserved: int = len(BASE_CURRENCIES)):
        self.path = Path(path)
        self.reserved = reserved

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Dict[str, int]:
        """Load the mapping; an absent file is a first run and yields {}"""
        if not self.path.exists():
            log.info(f"No mapping at {self.path}, starting from an empty mapping")
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            raise MappingStoreError(f"Cannot read mapping {self.path}: {exc}") from exc

        try:
            mapping = _mapping_adapter.validate_python(raw, strict=True)
        except ValidationError as exc:
            raise MappingStoreError(f"Corrupt mapping {self.path}: {exc}") from exc

        self._check_identifiers(mapping)
        log.info(f"Loaded {len(mapping)} identifiers from {self.path}")
        return mapping

    def save(self, mapping: Dict[str, int]) -> None:
        """Replace the whole file. Written to a sibling temp file then renamed."""
        body = json.dumps(mapping, sort_keys=True, indent=2) + "\n"
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(body)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise MappingStoreError(f"Cannot write mapping {self.path}: {exc}") from exc
        log.info(f"Saved {len(mapping)} identifiers to {self.path}")

    def _check_identifiers(self, mapping: Dict[str, int]) -> None:
        seen: Dict[int, str] = {}
        for symbol, num in mapping.items():
            if num < self.reserved:
                raise MappingStoreError(
                    f"Corrupt mapping {self.path}: {symbol!r} uses reserved identifier {num}"
                )
            if num in seen:
                raise MappingStoreError(
                    f"Corrupt mapping {self.path}: identifier {num} shared by {seen[num]!r} and {symbol!r}"
                )
            seen[num] = symbol
