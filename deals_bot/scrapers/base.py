"""Base scraper protocol and abstractions for storefront search pages.

Defines the unified interface that all storefront scrapers implement, the
compiled selector definition each store is configured with, and the registry
the aggregator uses to find the active stores.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote_plus

import aiohttp
import soupsieve
from bs4 import Tag

from ..exceptions import NetworkError
from ..models import GameRecord, Store
from .extractor import compile_selector, iter_rows, parse_document


class ScraperProtocol(Protocol):
    """Protocol defining the interface for all storefront scrapers.

    Methods:
        fetch: Search the store and return matching game records.
        build_url: Build the search URL for a query.
        get_store: Get store identifier.
    """

    async def fetch(self, session: aiohttp.ClientSession, query: str) -> list[GameRecord]:
        """Search the storefront for a game title.

        Args:
            session: Shared HTTP session for requests.
            query: Free-text game title.

        Returns:
            Game records in document order, empty if nothing matched.

        Raises:
            NetworkError: If the request fails, times out or returns non-2xx.
        """
        ...

    def build_url(self, query: str) -> str:
        """Build the search URL for a query."""
        ...

    def get_store(self) -> Store:
        """Get the store identifier."""
        ...


@dataclass(frozen=True)
class StoreDefinition:
    """Compiled selector chain and search endpoint of one storefront.

    Attributes:
        search_url: Base search URL the encoded query is appended to.
        results: Selector of the results container.
        row: Selector of one game row inside the container.
        fields: Selectors of the fields inside a row, keyed by field name.
        extra_params: Fixed query string appended after the encoded query.
    """

    search_url: str
    results: soupsieve.SoupSieve
    row: soupsieve.SoupSieve
    fields: dict[str, soupsieve.SoupSieve]
    extra_params: str = ""

    @classmethod
    def from_css(
        cls,
        search_url: str,
        results: str,
        row: str,
        fields: dict[str, str],
        extra_params: str = "",
    ) -> "StoreDefinition":
        """Compile selector text into a store definition.

        Raises:
            ConfigurationError: If any selector is invalid.
        """
        return cls(
            search_url=search_url,
            results=compile_selector(results),
            row=compile_selector(row),
            fields={name: compile_selector(css) for name, css in fields.items()},
            extra_params=extra_params,
        )


class BaseStoreScraper(ABC):
    """Base class providing request and row-walking logic for all stores.

    Subclasses supply a StoreDefinition and turn one row into a GameRecord.
    """

    def __init__(self, store: Store, definition: StoreDefinition):
        """Initialize base scraper.

        Args:
            store: Store identifier.
            definition: Compiled selectors and endpoint of the store.
        """
        self.store = store
        self.definition = definition
        self.logger = logging.getLogger(f"{__name__}.{store.value}")

    def get_store(self) -> Store:
        return self.store

    def build_url(self, query: str) -> str:
        """Form-encode the query into the store's search URL."""
        encoded = quote_plus(query)
        return f"{self.definition.search_url}{encoded}{self.definition.extra_params}"

    async def fetch(self, session: aiohttp.ClientSession, query: str) -> list[GameRecord]:
        """Download the search page for query and parse it."""
        url = self.build_url(query)
        self._log_scraping_start(url)

        try:
            async with session.get(url) as response:
                response.raise_for_status()
                html = await response.text()
        except aiohttp.ClientResponseError as e:
            self._log_scraping_error(url, e)
            raise NetworkError(self.store.value, url, f"HTTP {e.status}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self._log_scraping_error(url, e)
            raise NetworkError(self.store.value, url, type(e).__name__) from e

        records = self.parse(html)
        self._log_scraping_success(url, len(records))
        return records

    def parse(self, html: str) -> list[GameRecord]:
        """Extract game records from a search page, in document order."""
        document = parse_document(html)
        records: list[GameRecord] = []
        for row in iter_rows(document, self.definition.results, self.definition.row):
            record = self._parse_row(row)
            if record is not None:
                records.append(record)
        return records

    @abstractmethod
    def _parse_row(self, row: Tag) -> GameRecord | None:
        """Turn one game row into a record, None if it carries no price."""

    def _field(self, name: str) -> soupsieve.SoupSieve:
        return self.definition.fields[name]

    def _log_scraping_start(self, url: str) -> None:
        self.logger.info(f"Searching {self.store.display_name}: {url}")

    def _log_scraping_success(self, url: str, count: int) -> None:
        self.logger.info(f"{self.store.display_name} search found: {count}")

    def _log_scraping_error(self, url: str, error: BaseException) -> None:
        self.logger.error(
            f"Failed to search {self.store.display_name} ({url}): {type(error).__name__}: {error}"
        )


class ScraperRegistry:
    """Registry for managing storefront scrapers.

    Keeps scrapers in registration order, which is the order they are
    dispatched in by the aggregator.
    """

    def __init__(self, scrapers: Iterable[ScraperProtocol] = ()) -> None:
        """Initialize registry, optionally with scrapers."""
        self._scrapers: dict[Store, ScraperProtocol] = {}
        self.logger = logging.getLogger(f"{__name__}.registry")
        for scraper in scrapers:
            self.register(scraper)

    def register(self, scraper: ScraperProtocol) -> None:
        """Register a new scraper, replacing any scraper of the same store."""
        store = scraper.get_store()
        self._scrapers[store] = scraper
        self.logger.info(f"Registered scraper for store: {store.value}")

    def get_scraper(self, store: Store) -> ScraperProtocol | None:
        """Get scraper by store, None if not registered."""
        return self._scrapers.get(store)

    def get_all_stores(self) -> list[Store]:
        """Get list of all registered stores."""
        return list(self._scrapers.keys())

    def scrapers(self) -> list[ScraperProtocol]:
        """Get all registered scrapers in registration order."""
        return list(self._scrapers.values())
