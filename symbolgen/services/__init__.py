# Services package
from symbolgen.services.asset_filter import filter_serious_assets, select_assets, with_curated_assets
from symbolgen.services.assignment import Assignment, assign_identifiers
from symbolgen.services.renderer import ArtifactRenderer
from symbolgen.services.symbol_service import SymbolTableService

__all__ = [
    "filter_serious_assets",
    "select_assets",
    "with_curated_assets",
    "Assignment",
    "assign_identifiers",
    "ArtifactRenderer",
    "SymbolTableService",
]
