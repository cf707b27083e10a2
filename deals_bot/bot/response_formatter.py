"""Response formatting for deal comparisons.

Turns a ComparisonResult into the text sent back to the chat: the canonical
game name as title, followed by one block per store.
"""

from ..models import ComparisonResult, MatchResult
from .messages import NOT_FOUND_FIELD, PRICE_FIELD, STORE_FIELD


class ResponseFormatter:
    """Formats bot responses for deal comparisons."""

    def format_match(self, match: MatchResult) -> str:
        """Format one store's field: price and discount, or not found.

        Args:
            match: Match outcome of one store.

        Returns:
            Field body without the store name.
        """
        if match.record is None:
            return NOT_FOUND_FIELD
        return PRICE_FIELD.format(
            price=match.record.display_price, discount=match.record.discount
        )

    def format_fields(self, comparison: ComparisonResult) -> list[tuple[str, str]]:
        """Store name and field body pairs in presentation order."""
        return [
            (match.store.display_name, self.format_match(match))
            for match in comparison.ordered_matches()
        ]

    def format_comparison(self, comparison: ComparisonResult) -> str:
        """Format the full comparison message.

        Args:
            comparison: Result from the deal aggregator.

        Returns:
            Message text with the title line and one block per store.
        """
        blocks = [comparison.canonical_name]
        for store_name, body in self.format_fields(comparison):
            blocks.append(STORE_FIELD.format(store=store_name, body=body))
        return "\n\n".join(blocks)
