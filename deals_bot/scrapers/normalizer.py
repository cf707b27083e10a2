"""Field normalization for scraped price and discount text."""

import re

NO_DISCOUNT = "0%"

_FIRST_DIGIT_RE = re.compile(r"\d")


def extract_currency(price_text: str) -> str:
    """Return the non-numeric prefix of a price text, whitespace trimmed.

    "R$49,90" and "R$ 49,90" give "R$". Empty text, or text starting with a
    digit, gives "". Text without any digit is returned whole.
    """
    return _FIRST_DIGIT_RE.split(price_text, maxsplit=1)[0].strip()


def normalize_discount(discount_text: str) -> str:
    """Coerce an empty discount field to the "no active discount" label."""
    return discount_text or NO_DISCOUNT


def join_price_parts(*parts: str) -> str:
    """Join a price split across several DOM nodes (integer, decimal)."""
    return "".join(parts)


def has_price(*prices: str) -> bool:
    """A listing is kept only if at least one of its prices is present."""
    return any(prices)
