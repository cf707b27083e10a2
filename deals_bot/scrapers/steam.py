"""Steam store search scraper.

Parses the static search results page of store.steampowered.com. Each
result row carries the title, the original and final price cells, the
discount percentage and a capsule image.
"""

from bs4 import Tag

from ..models import GameRecord, Store
from .base import BaseStoreScraper, StoreDefinition
from .extractor import extract_attr, extract_text
from .normalizer import extract_currency, has_price, normalize_discount

STEAM_SEARCH_URL = "https://store.steampowered.com/search/?term="

STEAM_DEFINITION = StoreDefinition.from_css(
    search_url=STEAM_SEARCH_URL,
    results="div[id='search_resultsRows']",
    row="a.search_result_row",
    fields={
        "title": "span.title",
        "full_price": "div.discount_original_price",
        "discounted_price": "div.discount_final_price",
        "discount": "div.discount_pct",
        "image": "div.search_capsule > img",
    },
)


class SteamScraper(BaseStoreScraper):
    """Steam scraper implementing ScraperProtocol."""

    def __init__(self, definition: StoreDefinition = STEAM_DEFINITION) -> None:
        super().__init__(Store.STEAM, definition)

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
