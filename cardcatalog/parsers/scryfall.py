"""
Scryfall catalog decoder.

Parses a Scryfall search/list document of the shape ``{"data": [card, ...]}``
into Card models. Wire records carry many fields the catalog does not use;
those are ignored. Missing required fields fail the whole document.

Card objects: https://scryfall.com/docs/api/cards
"""

import json

from pydantic import BaseModel, ConfigDict, ValidationError

from cardcatalog.models.card import Card, ImageUris, Prices
from cardcatalog.models.failure import CatalogDecodeError


class ImageUrisPayload(BaseModel):
    """``image_uris`` object on a Scryfall card."""

    model_config = ConfigDict(extra="ignore")

    small: str | None = None
    normal: str | None = None
    large: str | None = None
    png: str | None = None
    art_crop: str | None = None
    border_crop: str | None = None


class PricesPayload(BaseModel):
    """``prices`` object on a Scryfall card. Quotes stay strings."""

    model_config = ConfigDict(extra="ignore")

    usd: str | None = None
    usd_foil: str | None = None
    usd_etched: str | None = None
    eur: str | None = None
    eur_foil: str | None = None
    tix: str | None = None


class CardPayload(BaseModel):
    """One card record as it appears on the wire."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    mana_cost: str | None = None
    type_line: str
    oracle_text: str
    colors: list[str] = []
    rarity: str
    artist: str
    foil: bool = False
    set: str
    image_uris: ImageUrisPayload | None = None
    prices: PricesPayload | None = None
    legalities: dict[str, str] | None = None

    def to_card(self) -> Card:
        """Convert to the immutable Card model."""
        return Card(
            id=self.id,
            name=self.name,
            type_line=self.type_line,
            oracle_text=self.oracle_text,
            rarity=self.rarity,
            artist=self.artist,
            set_code=self.set,
            mana_cost=self.mana_cost,
            colors=tuple(self.colors),
            foil=self.foil,
            images=ImageUris(**self.image_uris.model_dump()) if self.image_uris else None,
            prices=Prices(**self.prices.model_dump()) if self.prices else None,
            legalities=self.legalities,
        )


class CatalogPayload(BaseModel):
    """Top-level catalog document."""

    model_config = ConfigDict(extra="ignore")

    data: list[CardPayload]


def parse_catalog(raw: bytes | str) -> list[Card]:
    """
    Decode a catalog document into cards, in source order.

    Args:
        raw: JSON document bytes (or text)

    Returns:
        Cards in the order they appear under ``data``.
        Duplicate ids are kept; de-duplication is the store's concern.

    Raises:
        CatalogDecodeError: If the content is not JSON or does not match
            the card schema
    """
    try:
        document = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise CatalogDecodeError(
            "Card catalog is corrupted and could not be read.",
            detail=str(e),
        ) from e

    try:
        payload = CatalogPayload.model_validate(document)
    except ValidationError as e:
        # Record input stays out of the user-facing detail
        errors = e.errors(include_input=False, include_url=False)
        raise CatalogDecodeError(
            "Card catalog does not match the expected card format.",
            detail=f"{e.error_count()} validation errors: {errors[:3]}",
        ) from e

    return [card.to_card() for card in payload.data]
