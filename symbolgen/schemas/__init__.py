from symbolgen.schemas.asset import Asset, CURATED_ASSETS

__all__ = [
    "Asset",
    "CURATED_ASSETS",
]
