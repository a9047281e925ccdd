"""Selection of the assets that are worth a permanent identifier.

The feed lists thousands of coins, most of them illiquid or ambiguous. An asset
is admitted only when it trades enough, has a sane symbol, and its symbol is
not claimed by another liquid asset. Rejections are logged and never fatal;
a volume that is present but not a number is fatal because the feed can no
longer be trusted.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, List, Sequence

from symbolgen.core.config import BASE_CURRENCIES
from symbolgen.core.errors import FeedCorruptionError
from symbolgen.core.logging import get_logger
from symbolgen.schemas.asset import Asset, CURATED_ASSETS

log = get_logger("asset_filter")

DEFAULT_MIN_VOLUME_USD = 100_000.0

# The feed appends "@N" to disambiguate symbols it knows are reused
SYMBOL_SEPARATOR = "@"

# Plain decimal or exponent notation, or inf/nan. No digit separators, no padding.
_NUMBER_RE = re.compile(r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)", re.IGNORECASE)


def volume_is_acceptable(asset: Asset, min_volume: float = DEFAULT_MIN_VOLUME_USD) -> bool:
    if not asset.daily_volume_usd:
        return False
    if not _NUMBER_RE.fullmatch(asset.daily_volume_usd):
        raise FeedCorruptionError(
            f"Malformed 24h volume {asset.daily_volume_usd!r} for {asset.symbol!r}"
        )
    return float(asset.daily_volume_usd) > min_volume


def symbol_is_acceptable(symbol: str) -> bool:
    if not symbol or SYMBOL_SEPARATOR in symbol:
        return False
    return symbol[0].isalpha()


def filter_serious_assets(
    assets: Sequence[Asset],
    min_volume: float = DEFAULT_MIN_VOLUME_USD,
    base_currencies: Iterable[str] = BASE_CURRENCIES,
) -> List[Asset]:
    """Return the admissible assets in feed order.

    Symbols of the base currencies are hard-wired to the reserved identifiers,
    so a feed listing for one of them is dropped.
    """
    reserved_symbols = set(base_currencies)
    liquid = [volume_is_acceptable(asset, min_volume) for asset in assets]

    # Only liquid listings count towards a symbol clash
    counts = Counter(asset.symbol for asset, ok in zip(assets, liquid) if ok)

    admitted: List[Asset] = []
    for asset, ok in zip(assets, liquid):
        if not ok:
            log.warning(f"Too low volume {asset.symbol!r} ({asset.daily_volume_usd})")
            continue
        if not symbol_is_acceptable(asset.symbol):
            log.warning(f"Dumb symbol {asset.symbol!r}")
            continue
        if asset.symbol in reserved_symbols:
            log.warning(f"Base currency symbol {asset.symbol!r}")
            continue
        if counts[asset.symbol] > 1:
            log.warning(f"Doubled symbol {asset.symbol!r}")
            continue
        admitted.append(asset)
    return admitted


def with_curated_assets(
    assets: Sequence[Asset],
    curated: Iterable[Asset] = CURATED_ASSETS,
) -> List[Asset]:
    """Append curated assets not already admitted from the feed."""
    result = list(assets)
    present = {asset.symbol for asset in result}
    for asset in curated:
        if asset.symbol in present:
            log.debug(f"Curated symbol {asset.symbol!r} already listed by the feed")
            continue
        result.append(asset.model_copy())
        present.add(asset.symbol)
    return result


def select_assets(
    assets: Sequence[Asset],
    min_volume: float = DEFAULT_MIN_VOLUME_USD,
    curated: Iterable[Asset] = CURATED_ASSETS,
) -> List[Asset]:
    """Filter the feed and add the curated assets."""
    admitted = filter_serious_assets(assets, min_volume)
    log.info(
        f"Asset selection: fetched={len(assets)} admitted={len(admitted)} "
        f"rejected={len(assets) - len(admitted)}"
    )
    return with_curated_assets(admitted, curated)
