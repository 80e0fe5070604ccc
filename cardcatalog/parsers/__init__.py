from cardcatalog.parsers.scryfall import CatalogPayload, CardPayload, parse_catalog

__all__ = [
    "CardPayload",
    "CatalogPayload",
    "parse_catalog",
]
