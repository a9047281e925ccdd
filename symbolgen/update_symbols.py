"""Symbol table generator entrypoint.

Usage:
    python -m symbolgen.update_symbols                # Fetch the live feed
    python -m symbolgen.update_symbols feed.json      # Use a saved feed snapshot
"""

import asyncio
import sys
from typing import Any, Dict, Optional

from symbolgen.core.config import settings
from symbolgen.core.errors import SymbolgenError
from symbolgen.core.logging import get_logger
from symbolgen.services.symbol_service import SymbolTableService

logger = get_logger("update_symbols")


async def run_update(feed_path: Optional[str] = None) -> Dict[str, Any]:
    """Run one generation pass."""
    service = SymbolTableService.from_settings(settings, feed_path=feed_path)
    return await service.run()


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for symbol table generation."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 1:
        logger.error(f"Expected at most one feed file argument, got {len(args)}")
        return 2

    feed_path = args[0] if args else None
    logger.info(f"Symbol update starting (env={settings.ENV})")

    try:
        result = asyncio.run(run_update(feed_path))
    except SymbolgenError:
        # Already logged by the service; previous mapping is untouched
        return 1

    logger.info(f"Symbol update completed: {result['assigned']} symbols, {len(result['new_symbols'])} new")
    return 0


if __name__ == "__main__":
    sys.exit(main())
