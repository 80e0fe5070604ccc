import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from cardcatalog.models.card import Card, Prices

CardFactory = Callable[..., Card]


@pytest.fixture
def make_card() -> CardFactory:
    """Factory for cards with only the fields a test cares about."""

    def _make(
        id: str,
        name: str = "Test Card",
        rarity: str = "common",
        artist: str = "Test Artist",
        colors: tuple[str, ...] = (),
        usd: str | None = None,
        eur: str | None = None,
        tix: str | None = None,
        **kwargs: Any,
    ) -> Card:
        prices = None
        if usd is not None or eur is not None or tix is not None:
            prices = Prices(usd=usd, eur=eur, tix=tix)
        return Card(
            id=id,
            name=name,
            type_line=kwargs.pop("type_line", "Enchantment"),
            oracle_text=kwargs.pop("oracle_text", ""),
            rarity=rarity,
            artist=artist,
            set_code=kwargs.pop("set_code", "wot"),
            colors=colors,
            prices=prices,
            **kwargs,
        )

    return _make


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """Sample Scryfall card records, wire format."""
    return [
        {
            "object": "card",
            "id": "card-1",
            "name": "Rhystic Study",
            "mana_cost": "{2}{U}",
            "type_line": "Enchantment",
            "oracle_text": "Whenever an opponent casts a spell, you may draw a card.",
            "colors": ["U"],
            "rarity": "mythic",
            "artist": "Jack Hughes",
            "foil": True,
            "set": "wot",
            "image_uris": {
                "normal": "https://cards.example/normal/card-1.jpg",
                "art_crop": "https://cards.example/art_crop/card-1.jpg",
            },
            "prices": {"usd": "38.12", "usd_foil": "52.40", "eur": "31.50", "tix": None},
            "legalities": {"legacy": "legal", "standard": "not_legal"},
        },
        {
            "object": "card",
            "id": "card-2",
            "name": "Blood Moon",
            "mana_cost": "{2}{R}",
            "type_line": "Enchantment",
            "oracle_text": "Nonbasic lands are Mountains.",
            "colors": ["R"],
            "rarity": "mythic",
            "artist": "Kim Sokol",
            "foil": False,
            "set": "wot",
        },
        {
            "object": "card",
            "id": "card-3",
            "name": "Utopia Sprawl",
            "type_line": "Enchantment — Aura",
            "oracle_text": "",
            "rarity": "rare",
            "artist": "Yuliya Litvinova",
            "set": "wot",
        },
    ]


@pytest.fixture
def catalog_bytes(sample_records: list[dict[str, Any]]) -> bytes:
    return json.dumps({"object": "list", "data": sample_records}).encode("utf-8")


@pytest.fixture
def catalog_dir(catalog_bytes: bytes, tmp_path: Path) -> Path:
    """Directory holding a catalog snapshot named "test-catalog"."""
    (tmp_path / "test-catalog.json").write_bytes(catalog_bytes)
    return tmp_path
