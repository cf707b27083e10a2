"""Storefront scrapers package.

Contains the selector-walk extraction engine, field normalization and the
store-specific scrapers that turn search pages into game records.

Architecture:
- ScraperProtocol: Unified interface for all storefront scrapers
- ScraperRegistry: Ordered collection of the active scrapers
- SteamScraper, EpicScraper, NuuvemScraper: Store implementations

Every store definition compiles its selectors on import, so a malformed
selector fails at startup with ConfigurationError.
"""

from collections.abc import Iterable

from ..models import Store
from .base import BaseStoreScraper, ScraperProtocol, ScraperRegistry, StoreDefinition
from .epic import EpicScraper
from .nuuvem import NuuvemScraper
from .steam import SteamScraper


def create_scraper(store: Store, nuuvem_zero_price_without_discount: bool = False) -> BaseStoreScraper:
    """Create the scraper for a store."""
    if store is Store.STEAM:
        return SteamScraper()
    if store is Store.EPIC:
        return EpicScraper()
    return NuuvemScraper(zero_price_without_discount=nuuvem_zero_price_without_discount)


def build_registry(
    active: Iterable[Store | str], nuuvem_zero_price_without_discount: bool = False
) -> ScraperRegistry:
    """Build a registry holding one scraper per active store.

    Args:
        active: Stores to query, in dispatch order.
        nuuvem_zero_price_without_discount: Legacy Nuuvem price rule switch.

    Returns:
        Registry of the active scrapers.
    """
    return ScraperRegistry(
        create_scraper(Store(store), nuuvem_zero_price_without_discount) for store in active
    )


__all__ = [
    "BaseStoreScraper",
    "EpicScraper",
    "NuuvemScraper",
    "ScraperProtocol",
    "ScraperRegistry",
    "SteamScraper",
    "StoreDefinition",
    "build_registry",
    "create_scraper",
]
