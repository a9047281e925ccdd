"""End-to-end symbol table generation: feed -> identifiers -> source files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from symbolgen.core.config import Settings
from symbolgen.core.errors import SymbolgenError
from symbolgen.core.identifier_store import IdentifierStore
from symbolgen.core.logging import get_logger
from symbolgen.ingestion.base import BaseSource
from symbolgen.ingestion.coinmarketcap import CoinMarketCapSource
from symbolgen.ingestion.file_source import JSONFileSource
from symbolgen.services.asset_filter import DEFAULT_MIN_VOLUME_USD, select_assets
from symbolgen.services.assignment import assign_identifiers
from symbolgen.services.renderer import ArtifactRenderer

log = get_logger("symbol_service")


class SymbolTableService:
    """Runs one full, sequential generation pass.

    Responsibilities:
    - Fetch the feed (all or nothing)
    - Select the serious assets and add curated ones
    - Assign identifiers against the persisted mapping
    - Persist the mapping, then render every configured artifact
    """

    def __init__(
        self,
        source: BaseSource,
        store: IdentifierStore,
        renderer: ArtifactRenderer,
        outputs: Mapping[str, str | Path],
        min_volume: float = DEFAULT_MIN_VOLUME_USD,
    ):
        self.source = source
        self.store = store
        self.renderer = renderer
        self.outputs = dict(outputs)
        self.min_volume = min_volume

    @classmethod
    def from_settings(cls, settings: Settings, feed_path: Optional[str] = None) -> "SymbolTableService":
        if feed_path:
            source: BaseSource = JSONFileSource(feed_path)
        else:
            source = CoinMarketCapSource(
                settings.FEED_URL,
                limit=settings.FEED_LIMIT,
                timeout=settings.FEED_TIMEOUT_SECONDS,
            )
        return cls(
            source=source,
            store=IdentifierStore(settings.MAPPING_PATH, reserved=settings.RESERVED_IDENTIFIERS),
            renderer=ArtifactRenderer(settings.TEMPLATES_DIR),
            outputs=settings.OUTPUTS,
            min_volume=settings.MIN_DAILY_VOLUME_USD,
        )

    async def run(self) -> Dict[str, Any]:
        log.info(f"Starting symbol table run | source={self.source.name} mapping={self.store.path}")
        try:
            fetched = await self.source.fetch()
            selected = select_assets(fetched, self.min_volume)

            mapping = self.store.load()
            assignment = assign_identifiers(selected, mapping, reserved=self.store.reserved)

            # Every artifact renders in memory before anything touches the disk
            rendered = [
                (self.renderer.render(template, assignment.assets), dest)
                for template, dest in self.outputs.items()
            ]

            self.store.save(assignment.mapping)

            written = [str(self.renderer.write_text(text, dest)) for text, dest in rendered]
        except SymbolgenError as exc:
            log.error(f"Symbol table run failed: {exc}")
            raise

        log.info(
            f"Symbol table run finished | assets={len(assignment.assets)} "
            f"new={len(assignment.new_symbols)} outputs={len(written)}"
        )
        return {
            "success": True,
            "fetched": len(fetched),
            "admitted": len(selected),
            "assigned": len(assignment.assets),
            "new_symbols": assignment.new_symbols,
            "outputs": written,
        }
