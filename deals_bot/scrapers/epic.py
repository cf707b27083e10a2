"""Epic Games Store browse page scraper.

The Epic storefront renders most of its catalogue client-side, so the static
page frequently has no result rows. The scraper is registered but left out
of the default active stores; enable it through ``stores.active``.
Selectors are positional and follow the current card layout.
"""

from bs4 import Tag

from ..models import GameRecord, Store
from .base import BaseStoreScraper, StoreDefinition
from .extractor import extract_attr, extract_text
from .normalizer import extract_currency, has_price, normalize_discount

EPIC_SEARCH_URL = "https://store.epicgames.com/pt-BR/browse?q="
EPIC_SEARCH_PARAMS = "&sortBy=relevancy&sortDir=DESC&count=40"

_PRICE_BLOCK = "div:nth-child(2) > div:nth-child(3) > div"

EPIC_DEFINITION = StoreDefinition.from_css(
    search_url=EPIC_SEARCH_URL,
    extra_params=EPIC_SEARCH_PARAMS,
    results="main section ul",
    row="li > div > div > a > div > div",
    fields={
        "title": "div:nth-child(2) > div:nth-child(2) > div > div",
        "full_price": (
            f"{_PRICE_BLOCK} > div:nth-child(2) > div > div:first-child > span > div"
        ),
        "discounted_price": f"{_PRICE_BLOCK} > div:nth-child(2) > div > div:nth-child(2) > span",
        "discount": f"{_PRICE_BLOCK} > div:first-child > span > div",
        "image": "div:first-child > div > div > div > div > img",
    },
)


class EpicScraper(BaseStoreScraper):
    """Epic Games Store scraper implementing ScraperProtocol."""

    def __init__(self, definition: StoreDefinition = EPIC_DEFINITION) -> None:
        super().__init__(Store.EPIC, definition)

    def _parse_row(self, row: Tag) -> GameRecord | None:
        full_price = extract_text(row, self._field("full_price"))
        discounted_price = extract_text(row, self._field("discounted_price"))
        if not has_price(full_price, discounted_price):
            return None

        return GameRecord(
            store=self.store,
            name=extract_text(row, self._field("title")),
            currency=extract_currency(discounted_price),
            full_price=full_price,
            discounted_price=discounted_price,
            discount=normalize_discount(extract_text(row, self._field("discount"))),
            image_url=extract_attr(row, self._field("image"), "src"),
        )
