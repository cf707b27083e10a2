"""Nuuvem catalog search scraper.

Nuuvem splits a price over two nodes (integer and decimal part) and shows
the currency symbol in its own node, so prices are stored without currency
and the symbol is prefixed when displayed.
"""

from bs4 import Tag

from ..models import GameRecord, Store
from .base import BaseStoreScraper, StoreDefinition
from .extractor import extract_attr, extract_text
from .normalizer import (
    extract_currency,
    has_price,
    join_price_parts,
    normalize_discount,
)

NUUVEM_SEARCH_URL = "https://www.nuuvem.com/br-pt/catalog/page/1/search/"

# Shown instead of the real price by the legacy no-discount rule.
ZERO_PRICE = "0"

NUUVEM_DEFINITION = StoreDefinition.from_css(
    search_url=NUUVEM_SEARCH_URL,
    results="div.products-items",
    row="div.product-card--grid a.product-card--wrapper",
    fields={
        "title": "h3.product-title",
        "currency": "sup.currency-symbol",
        "price_integer": "span.integer",
        "price_decimal": "span.decimal",
        "discount": "span.product-price--discount",
        "image": "div.product-img > img",
    },
)


class NuuvemScraper(BaseStoreScraper):
    """Nuuvem scraper implementing ScraperProtocol.

    Args:
        definition: Compiled selectors and endpoint.
        zero_price_without_discount: Replace the price of listings without an
            active discount by a zero amount, as the first bot release did.
    """

    def __init__(
        self,
        definition: StoreDefinition = NUUVEM_DEFINITION,
        zero_price_without_discount: bool = False,
    ) -> None:
        super().__init__(Store.NUUVEM, definition)
        self.zero_price_without_discount = zero_price_without_discount

    def _parse_row(self, row: Tag) -> GameRecord | None:
        price = join_price_parts(
            extract_text(row, self._field("price_integer")),
            extract_text(row, self._field("price_decimal")),
        )
        if not has_price(price):
            return None

        discount = extract_text(row, self._field("discount"))
        if not discount and self.zero_price_without_discount:
            price = ZERO_PRICE

        return GameRecord(
            store=self.store,
            name=extract_text(row, self._field("title")),
            currency=extract_currency(extract_text(row, self._field("currency"))),
            full_price=price,
            discounted_price=price,
            discount=normalize_discount(discount),
            image_url=extract_attr(row, self._field("image"), "src"),
        )
