from cardcatalog.services.bundle import load_catalog_json
from cardcatalog.services.card_detail import (
    DetailRow,
    card_detail_rows,
    legal_formats,
    preferred_image_url,
)
from cardcatalog.services.catalog_store import CatalogStore
from cardcatalog.services.query_engine import matches_filter, query

__all__ = [
    "CatalogStore",
    "DetailRow",
    "card_detail_rows",
    "legal_formats",
    "load_catalog_json",
    "matches_filter",
    "preferred_image_url",
    "query",
]
