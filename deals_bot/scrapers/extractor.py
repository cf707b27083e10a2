"""Generic selector-walk engine for storefront search pages.

Storefront adapters describe their markup as a chain of CSS selectors
(results container, game row, field within row). This module compiles those
selectors once and walks a parsed document with them, yielding raw text and
attribute values. Missing or malformed markup produces empty strings instead
of errors; only an invalid selector is an error.
"""

from collections.abc import Iterator

import soupsieve
from bs4 import BeautifulSoup, Tag

from ..exceptions import ConfigurationError


def compile_selector(css: str) -> soupsieve.SoupSieve:
    """Compile a static CSS selector.

    Args:
        css: Selector text.

    Returns:
        Compiled selector reusable across documents.

    Raises:
        ConfigurationError: If the selector cannot be parsed.
    """
    try:
        return soupsieve.compile(css)
    except soupsieve.SelectorSyntaxError as e:
        raise ConfigurationError(f"Invalid CSS selector {css!r}: {e}") from e


def parse_document(html: str) -> BeautifulSoup:
    """Parse a static HTML document."""
    return BeautifulSoup(html, "lxml")


def iter_rows(
    document: Tag, results: soupsieve.SoupSieve, row: soupsieve.SoupSieve
) -> Iterator[Tag]:
    """Yield game rows inside every results container, in document order."""
    for container in results.select(document):
        yield from row.select(container)


def _element_text(element: Tag) -> str:
    return " ".join(element.strings).strip().replace("\n", " ")


def extract_text(node: Tag, selector: soupsieve.SoupSieve) -> str:
    """Concatenate the cleaned text of every element matched inside node.

    Text nodes of one element are joined with a space, trimmed and have
    embedded newlines replaced by spaces. Texts of several matched elements
    are concatenated without a separator.
    """
    return "".join(_element_text(element) for element in selector.select(node))


def extract_attr(node: Tag, selector: soupsieve.SoupSieve, attr: str = "src") -> str:
    """Return an attribute of the first element matched inside node, or ''."""
    element = selector.select_one(node)
    if element is None:
        return ""
    value = element.get(attr)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return value
