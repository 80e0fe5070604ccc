"""
Catalog card models.

INVARIANTS:
- Card identity is its Scryfall id; equality and hashing use nothing else
- All models are frozen (immutable after construction); legalities is a
  read-only copy of the mapping it was built from
- Absent nested objects are None, never empty placeholders
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class ImageUris:
    """
    Image links for one card face.

    Attributes:
        small: 146x204 JPG
        normal: 488x680 JPG
        large: 672x936 JPG
        png: 745x1040 transparent PNG
        art_crop: Rectangular crop of the art only
        border_crop: Full card with the border trimmed
    """

    small: str | None = None
    normal: str | None = None
    large: str | None = None
    png: str | None = None
    art_crop: str | None = None
    border_crop: str | None = None


@dataclass(frozen=True, slots=True)
class Prices:
    """Currency quotes, kept as the strings Scryfall publishes."""

    usd: str | None = None
    usd_foil: str | None = None
    usd_etched: str | None = None
    eur: str | None = None
    eur_foil: str | None = None
    tix: str | None = None


@dataclass(frozen=True, slots=True, eq=False)
class Card:
    """
    One catalog entry.

    Attributes:
        id: Scryfall card id (stable, unique per printing)
        name: Card name
        type_line: Full type line (e.g., "Creature — Human Wizard")
        oracle_text: Rules text, empty for vanilla cards
        rarity: Rarity as published (common, uncommon, rare, mythic, ...)
        artist: Illustrator credit
        set_code: Set code (e.g., "WOE")
        mana_cost: Mana cost symbols (e.g., "{2}{R}"), None for lands
        colors: Color letters (W, U, B, R, G) in source order
        foil: True if the printing exists in foil
        images: Image links, None if the record has none
        prices: Price quotes, None if the record has none
        legalities: Format name -> legality status, None if absent
    """

    id: str
    name: str
    type_line: str
    oracle_text: str
    rarity: str
    artist: str
    set_code: str
    mana_cost: str | None = None
    colors: tuple[str, ...] = ()
    foil: bool = False
    images: ImageUris | None = None
    prices: Prices | None = None
    legalities: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        if self.legalities is not None:
            object.__setattr__(self, "legalities", MappingProxyType(dict(self.legalities)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
