"""Stable identifier assignment.

Identifiers are compiled into downstream programs, so an identifier that has
been handed out once must never move. Known symbols keep their stored value;
new symbols get their position in symbol order (past the reserved base
currencies) or the next free value above it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence, Set

from symbolgen.core.config import BASE_CURRENCIES
from symbolgen.core.logging import get_logger
from symbolgen.schemas.asset import Asset

log = get_logger("assignment")


@dataclass
class Assignment:
    """Result of one assignment pass."""

    assets: List[Asset]  # ordered by identifier
    mapping: Dict[str, int]  # everything to persist, old and new
    new_symbols: List[str]


def next_free(start: int, taken: Set[int]) -> int:
    num = start
    while num in taken:
        num += 1
    return num


def assign_identifiers(
    assets: Sequence[Asset],
    mapping: Mapping[str, int],
    reserved: int = len(BASE_CURRENCIES),
) -> Assignment:
    """Give every asset its final identifier.

    Neither ``assets`` nor ``mapping`` is modified; the returned assets are
    copies carrying ``num``.
    """
    updated: Dict[str, int] = dict(mapping)
    taken: Set[int] = set(range(reserved))
    taken.update(mapping.values())

    assigned: List[Asset] = []
    new_symbols: List[str] = []
    for position, asset in enumerate(sorted(assets, key=lambda a: a.symbol)):
        if asset.symbol in mapping:
            num = mapping[asset.symbol]
        else:
            num = next_free(position + reserved, taken)
            new_symbols.append(asset.symbol)
            log.info(f"New symbol {asset.symbol!r} -> {num}")

        taken.add(num)
        updated[asset.symbol] = num
        assigned.append(asset.model_copy(update={"num": num}))

    assigned.sort(key=lambda a: a.num)
    log.info(f"Assigned {len(assigned)} identifiers ({len(new_symbols)} new)")
    return Assignment(assets=assigned, mapping=updated, new_symbols=new_symbols)

