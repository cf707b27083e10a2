"""Data models for the deals bot application.

Defines the storefront identifiers and the Pydantic models that flow through
the scrape-extract-reconcile pipeline: scraped game records, per-store match
outcomes and the final comparison handed to the chat layer. Prices and
discounts are kept as display strings exactly as each storefront formats them.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Store(str, Enum):
    """Storefronts the bot can query."""

    STEAM = "steam"
    EPIC = "epic"
    NUUVEM = "nuuvem"

    @property
    def display_name(self) -> str:
        """Human readable storefront name used in responses."""
        return _DISPLAY_NAMES[self]

    @property
    def price_embeds_currency(self) -> bool:
        """Whether the scraped price text already carries the currency symbol."""
        return self is not Store.NUUVEM


_DISPLAY_NAMES = {
    Store.STEAM: "Steam",
    Store.EPIC: "Epic Games",
    Store.NUUVEM: "Nuuvem",
}


class GameRecord(BaseModel):
    """One game listing scraped from a storefront search page.

    Attributes:
        store: Storefront the listing came from.
        name: Game title as displayed by the store.
        currency: Currency prefix extracted from the price text.
        full_price: Price before discount, empty if the store shows only one price.
        discounted_price: Price after discount, empty if not shown.
        discount: Discount label such as "-50%", "0%" when there is none.
        image_url: Capsule/cover image URL, empty if not found.
    """

    store: Store
    name: str
    currency: str = ""
    full_price: str = ""
    discounted_price: str = ""
    discount: str = "0%"
    image_url: str = ""

    @property
    def display_price(self) -> str:
        """Price to show: discounted price when present, full price otherwise."""
        price = self.discounted_price or self.full_price
        if self.store.price_embeds_currency:
            return price
        return f"{self.currency}{price}"


class MatchResult(BaseModel):
    """Outcome of searching one store's results for the canonical name."""

    store: Store
    record: GameRecord | None = None

    @property
    def found(self) -> bool:
        return self.record is not None


class ComparisonResult(BaseModel):
    """Merged answer for one deal query.

    Attributes:
        query: Original free-text query.
        canonical_name: Name chosen to represent the game across stores.
        image_url: Image of the record the canonical name was taken from.
        per_source: Match outcome for every active store.
    """

    query: str
    canonical_name: str
    image_url: str = ""
    per_source: dict[Store, MatchResult] = Field(default_factory=dict)

    def ordered_matches(self) -> list[MatchResult]:
        """Matches sorted descending by store display name for presentation."""
        return sorted(
            self.per_source.values(),
            key=lambda match: match.store.display_name,
            reverse=True,
        )
