"""
Card detail service.

Builds the labelled rows shown on a card's detail screen and picks the
image variant to display. Values the record does not carry render as "NA".
"""

from collections.abc import Sequence
from dataclasses import dataclass

from cardcatalog.models.card import Card

MISSING = "NA"

DEFAULT_IMAGE_PREFERENCE = ("normal", "large", "small", "png")

# Label and Prices attribute, in display order
PRICE_LABELS = [
    ("USD", "usd"),
    ("USD Foil", "usd_foil"),
    ("USD Etched", "usd_etched"),
    ("EUR", "eur"),
    ("EUR Foil", "eur_foil"),
    ("TIX", "tix"),
]


@dataclass(frozen=True, slots=True)
class DetailRow:
    """One labelled line on the detail screen."""

    label: str
    value: str


def preferred_image_url(
    card: Card,
    variants: Sequence[str] = DEFAULT_IMAGE_PREFERENCE,
) -> str | None:
    """
    Return the first image URL present among the given variants.

    Args:
        card: Card to pick an image for
        variants: ImageUris attribute names in order of preference

    Returns:
        URL string, or None if the card has no matching image.
    """
    if card.images is None:
        return None
    for variant in variants:
        url: str | None = getattr(card.images, variant, None)
        if url:
            return url
    return None


def legal_formats(card: Card) -> list[str]:
    """Sorted names of the formats the card is legal in."""
    if not card.legalities:
        return []
    return sorted(fmt for fmt, status in card.legalities.items() if status == "legal")


def card_detail_rows(card: Card) -> list[DetailRow]:
    """
    Build the detail screen rows for a card.

    Price rows appear only for quotes the record carries. The legality row
    lists every format the card is legal in.
    """
    rows = [
        DetailRow("Name", card.name),
        DetailRow("Mana Cost", card.mana_cost or MISSING),
        DetailRow("Type", card.type_line),
        DetailRow("Oracle Text", card.oracle_text or MISSING),
        DetailRow("Colors", ", ".join(card.colors) if card.colors else MISSING),
        DetailRow("Rarity", card.rarity),
        DetailRow("Set", card.set_code),
        DetailRow("Artist", card.artist),
        DetailRow("Foil", "Yes" if card.foil else "No"),
    ]

    if card.prices is not None:
        for label, attr in PRICE_LABELS:
            price = getattr(card.prices, attr)
            if price:
                rows.append(DetailRow(f"Price ({label})", price))

    formats = legal_formats(card)
    rows.append(DetailRow("Legal In", ", ".join(formats) if formats else MISSING))

    return rows
