"""
Catalog query engine.

Produces the ordered, filtered view of a record sequence. The engine is a
pure function: it holds no state, never mutates its input and never raises.

Filtering is case-insensitive on the card name. Sorting is ordinal and
case-sensitive on the raw key strings, so "Zebra" sorts before "apple"
and a price of "10" sorts before "9".
"""

from collections.abc import Sequence

from cardcatalog.models.card import Card
from cardcatalog.models.sort import SORT_KEYS, SortSpec


def matches_filter(card: Card, filter_text: str) -> bool:
    """True if the card name contains filter_text, ignoring case."""
    if not filter_text:
        return True
    return filter_text.lower() in card.name.lower()


def query(
    records: Sequence[Card],
    filter_text: str = "",
    sort: SortSpec | None = None,
) -> list[Card]:
    """
    Filter then sort records for display.

    Args:
        records: Cards in source order
        filter_text: Name substring to match; empty matches everything
        sort: Sort field and direction; None or no field keeps source order

    Returns:
        New list of matching cards.

    Examples:
        >>> query(cards, "dragon")
        >>> query(cards, "", SortSpec(SortField.PRICE_USD, SortDirection.DESCENDING))
    """
    results = [card for card in records if matches_filter(card, filter_text)]

    if sort is None or sort.field is None:
        return results

    # sorted() is stable and reverse=True inverts the comparison itself,
    # so equal keys keep source order in both directions.
    return sorted(results, key=SORT_KEYS[sort.field], reverse=sort.descending)
