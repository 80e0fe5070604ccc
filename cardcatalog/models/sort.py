"""
Sort specification for the catalog view.

SORT_KEYS maps each sortable field to the function extracting its key.
Every key is a plain string so ordering is ordinal and case-sensitive.
Absent prices sort as "".
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from cardcatalog.models.card import Card


class SortField(str, Enum):
    """Fields the catalog view can be ordered by."""

    NAME = "name"
    PRICE_USD = "priceUSD"
    PRICE_EUR = "priceEUR"
    PRICE_TIX = "priceTIX"
    RARITY = "rarity"
    COLOR = "color"
    ARTIST = "artist"


class SortDirection(str, Enum):
    """Sort direction."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass
class SortSpec:
    """
    Chosen sort field and direction.

    Direction is independent of the field: it can be toggled while no
    field is chosen, it just has no visible effect until one is.
    """

    field: SortField | None = None
    direction: SortDirection = SortDirection.ASCENDING

    def set_field(self, sort_field: SortField | None) -> None:
        """Replace the sort field. Direction is left unchanged."""
        self.field = sort_field

    def toggle_direction(self) -> None:
        """Flip between ascending and descending."""
        if self.direction is SortDirection.ASCENDING:
            self.direction = SortDirection.DESCENDING
        else:
            self.direction = SortDirection.ASCENDING

    @property
    def descending(self) -> bool:
        """True when the direction is descending."""
        return self.direction is SortDirection.DESCENDING


def _price_usd(card: Card) -> str:
    return (card.prices.usd if card.prices else None) or ""


def _price_eur(card: Card) -> str:
    return (card.prices.eur if card.prices else None) or ""


def _price_tix(card: Card) -> str:
    return (card.prices.tix if card.prices else None) or ""


SORT_KEYS: dict[SortField, Callable[[Card], str]] = {
    SortField.NAME: lambda card: card.name,
    SortField.PRICE_USD: _price_usd,
    SortField.PRICE_EUR: _price_eur,
    SortField.PRICE_TIX: _price_tix,
    SortField.RARITY: lambda card: card.rarity,
    SortField.COLOR: lambda card: "".join(card.colors),
    SortField.ARTIST: lambda card: card.artist,
}
