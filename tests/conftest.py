"""Global test configuration and fixtures.

Provides storefront HTML samples, a mocked aiohttp session and helpers for
building game records. No test performs real network requests.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from deals_bot.models import GameRecord, Store

STEAM_HTML = """
<html><body>
<div id="search_resultsRows">
  <a class="search_result_row" href="https://store.steampowered.com/app/70/">
    <div class="search_capsule"><img src="https://cdn.steam.test/70/capsule.jpg"></div>
    <div class="responsive_search_name_combined">
      <div class="search_name"><span class="title">Half-Life</span></div>
      <div class="search_price_discount_combined">
        <div class="discount_block">
          <div class="discount_pct">-50%</div>
          <div class="discount_prices">
            <div class="discount_original_price">R$ 20,69</div>
            <div class="discount_final_price">R$ 10,34</div>
          </div>
        </div>
      </div>
    </div>
  </a>
  <a class="search_result_row" href="https://store.steampowered.com/app/220/">
    <div class="search_capsule"><img src="https://cdn.steam.test/220/capsule.jpg"></div>
    <div class="responsive_search_name_combined">
      <div class="search_name"><span class="title">Half-Life 2</span></div>
      <div class="search_price_discount_combined">
        <div class="discount_block">
          <div class="discount_prices">
            <div class="discount_final_price">R$ 32,99</div>
          </div>
        </div>
      </div>
    </div>
  </a>
  <a class="search_result_row" href="https://store.steampowered.com/app/999/">
    <div class="search_capsule"><img src="https://cdn.steam.test/999/capsule.jpg"></div>
    <div class="responsive_search_name_combined">
      <div class="search_name"><span class="title">Half-Life: Coming Soon</span></div>
    </div>
  </a>
</div>
</body></html>
"""

NUUVEM_HTML = """
<html><body>
<div class="products-items">
  <div class="product-card--grid">
    <a class="product-card--wrapper" href="https://www.nuuvem.com/br-pt/item/half-life">
      <div class="product-img"><img src="https://cdn.nuuvem.test/half-life.jpg"></div>
      <h3 class="product-title">Half-Life</h3>
      <span class="product-price--discount">-60%</span>
      <div class="product-price--val"><sup class="currency-symbol">R$</sup><span class="integer">8</span><span class="decimal">,27</span></div>
    </a>
  </div>
  <div class="product-card--grid">
    <a class="product-card--wrapper" href="https://www.nuuvem.com/br-pt/item/half-life-2">
      <div class="product-img"><img src="https://cdn.nuuvem.test/half-life-2.jpg"></div>
      <h3 class="product-title">Half-Life 2</h3>
      <div class="product-price--val"><sup class="currency-symbol">R$</sup><span class="integer">32</span><span class="decimal">,99</span></div>
    </a>
  </div>
  <div class="product-card--grid">
    <a class="product-card--wrapper" href="https://www.nuuvem.com/br-pt/item/half-life-soundtrack">
      <h3 class="product-title">Half-Life Soundtrack</h3>
    </a>
  </div>
</div>
</body></html>
"""


def _epic_card(title: str, discount: str, full_price: str, discounted_price: str) -> str:
    """One Epic browse card; empty strings leave the cell present but blank."""
    slug = title.lower().replace(" ", "-")
    return (
        "<li><div><div><a href=\"/p/" + slug + "\"><div><div class=\"card\">"
        "<div class=\"media\"><div><div><div><div>"
        "<img src=\"https://cdn.epic.test/" + slug + ".jpg\">"
        "</div></div></div></div></div>"
        "<div class=\"info\">"
        "<div class=\"badge\">Jogo base</div>"
        "<div><div><div>" + title + "</div></div></div>"
        "<div><div>"
        "<div><span><div>" + discount + "</div></span></div>"
        "<div><div>"
        "<div><span><div>" + full_price + "</div></span></div>"
        "<div><span>" + discounted_price + "</span></div>"
        "</div></div>"
        "</div></div>"
        "</div>"
        "</div></div></a></div></div></li>"
    )


EPIC_HTML = (
    "<html><body><main><section><ul>"
    + _epic_card("Half-Life", "-50%", "R$ 20,00", "R$ 10,00")
    + _epic_card("Portal", "", "", "R$ 5,00")
    + _epic_card("Coming Soon", "", "", "")
    + "</ul></section></main></body></html>"
)

EMPTY_RESULTS_HTML = """
<html><body>
<div id="search_resultsRows"></div>
<div class="products-items"><p>Nenhum resultado encontrado</p></div>
<main><section><ul></ul></section></main>
</body></html>
"""


def make_session(html: str = "", error: BaseException | None = None) -> MagicMock:
    """Build a mocked aiohttp.ClientSession whose get() yields html.

    Args:
        html: Body returned by response.text().
        error: Exception raised by session.get() instead of responding.
    """
    session = MagicMock(spec=aiohttp.ClientSession)
    response = MagicMock()
    response.status = 200
    response.raise_for_status = MagicMock()
    response.text = AsyncMock(return_value=html)

    session.get.return_value.__aenter__.return_value = response
    if error is not None:
        session.get.side_effect = error
    return session


def make_record(store: Store, name: str, **fields: str) -> GameRecord:
    """Build a GameRecord with sensible price defaults."""
    defaults = {
        "currency": "R$",
        "full_price": "R$ 20,00",
        "discounted_price": "R$ 10,00",
        "discount": "-50%",
        "image_url": f"https://cdn.test/{store.value}/{name}.jpg",
    }
    defaults.update(fields)
    return GameRecord(store=store, name=name, **defaults)


class FakeScraper:
    """Scraper stand-in returning canned records, optionally slowly or failing."""

    def __init__(
        self,
        store: Store,
        records: list[GameRecord] | None = None,
        error: BaseException | None = None,
        delay: float = 0.0,
    ) -> None:
        self.store = store
        self.records = records or []
        self.error = error
        self.delay = delay
        self.calls: list[str] = []
        self.cancelled = False
        self.finished = False

    def get_store(self) -> Store:
        return self.store

    def build_url(self, query: str) -> str:
        return f"https://{self.store.value}.test/search?q={query}"

    async def fetch(self, session, query: str) -> list[GameRecord]:
        self.calls.append(query)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self.error is not None:
            raise self.error
        self.finished = True
        return list(self.records)


@pytest.fixture
def steam_html() -> str:
    return STEAM_HTML


@pytest.fixture
def nuuvem_html() -> str:
    return NUUVEM_HTML


@pytest.fixture
def epic_html() -> str:
    return EPIC_HTML


@pytest.fixture
def empty_html() -> str:
    return EMPTY_RESULTS_HTML


@pytest.fixture
def mock_session() -> MagicMock:
    """Mocked session that never performs network requests."""
    return make_session()
