"""Deal aggregation across storefronts.

Runs every active store scraper concurrently for one query, elects the
canonical game name from the highest-priority store with results, and looks
the canonical name up in every store's results.
"""

import asyncio
import logging
from collections.abc import Iterable
from datetime import datetime

import aiohttp

from ..exceptions import NetworkError
from ..models import ComparisonResult, GameRecord, MatchResult, Store
from ..scrapers.base import ScraperProtocol, ScraperRegistry
from .types import StoreFetchResult

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = (Store.STEAM, Store.NUUVEM)


def search_in(records: list[GameRecord], name: str) -> GameRecord | None:
    """Find the first record whose name equals name, ignoring case."""
    wanted = name.lower()
    for record in records:
        if record.name.lower() == wanted:
            return record
    return None


def elect_canonical(
    results: dict[Store, list[GameRecord]], priority: Iterable[Store], query: str
) -> tuple[str, str]:
    """Pick the display name and image for a comparison.

    The first record of the first store in priority order that has results
    wins. Without any results the raw query and an empty image are used.

    Returns:
        Tuple of (canonical name, image URL).
    """
    for store in priority:
        records = results.get(store)
        if records:
            first = records[0]
            return first.name, first.image_url
    return query, ""


class DealAggregator:
    """Orchestrates deal searches across storefronts.

    Responsibilities:
    - Fan out one search per active store and wait for all of them
    - Degrade failing stores to empty results
    - Reconcile per-store results into one ComparisonResult
    """

    def __init__(
        self, registry: ScraperRegistry, priority: Iterable[Store | str] = DEFAULT_PRIORITY
    ) -> None:
        """Initialize aggregator.

        Args:
            registry: Registry of active store scrapers.
            priority: Stores consulted, in order, for the canonical name.
        """
        self.registry = registry
        self.priority = [Store(store) for store in priority]

    async def _fetch_store(
        self, scraper: ScraperProtocol, session: aiohttp.ClientSession, query: str
    ) -> StoreFetchResult:
        """Search one store, converting failures into an empty result."""
        store = scraper.get_store()
        start_time = datetime.now()
        result: StoreFetchResult = {
            "store": store,
            "records": [],
            "error": None,
            "processing_time_ms": 0,
        }

        try:
            result["records"] = await scraper.fetch(session, query)
        except NetworkError as e:
            result["error"] = str(e)
            logger.warning(f"{store.display_name} unavailable, treating as no results: {e}")
        except Exception as e:
            result["error"] = str(e)
            logger.error(f"Unexpected error searching {store.display_name}: {e}", exc_info=True)
        finally:
            end_time = datetime.now()
            result["processing_time_ms"] = int((end_time - start_time).total_seconds() * 1000)

        return result

    async def fetch_all(
        self, query: str, session: aiohttp.ClientSession
    ) -> dict[Store, list[GameRecord]]:
        """Search every active store concurrently and wait for all of them.

        Args:
            query: Free-text game title.
            session: Shared HTTP session.

        Returns:
            Records per active store, empty for stores that failed.
        """
        scrapers = self.registry.scrapers()
        fetch_results = await asyncio.gather(
            *[self._fetch_store(scraper, session, query) for scraper in scrapers]
        )

        results: dict[Store, list[GameRecord]] = {}
        for fetch_result in fetch_results:
            store = fetch_result["store"]
            results[store] = fetch_result["records"]
            if fetch_result["error"]:
                logger.debug(
                    f"{store.display_name}: failed in {fetch_result['processing_time_ms']}ms "
                    f"({fetch_result['error']})"
                )
            else:
                logger.debug(
                    f"{store.display_name}: {len(fetch_result['records'])} records "
                    f"in {fetch_result['processing_time_ms']}ms"
                )
        return results

    async def compare(self, query: str, session: aiohttp.ClientSession) -> ComparisonResult:
        """Build the cross-store comparison for a game title.

        Never raises for per-store failures; stores that failed are reported
        as not found.

        Args:
            query: Free-text game title.
            session: Shared HTTP session.

        Returns:
            Comparison with one MatchResult per active store.
        """
        logger.info(f"Comparing deals for: {query!r}")
        results = await self.fetch_all(query, session)

        canonical_name, image_url = elect_canonical(results, self.priority, query)

        per_source = {
            store: MatchResult(store=store, record=search_in(records, canonical_name))
            for store, records in results.items()
        }

        found = [match.store.value for match in per_source.values() if match.found]
        logger.info(f"Canonical name {canonical_name!r} found in: {found or 'no stores'}")

        return ComparisonResult(
            query=query,
            canonical_name=canonical_name,
            image_url=image_url,
            per_source=per_source,
        )
