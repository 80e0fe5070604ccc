from cardcatalog.models.card import Card, ImageUris, Prices
from cardcatalog.models.failure import (
    CatalogDecodeError,
    DataUnavailableError,
    FailureDetail,
    FailureKind,
    KnownError,
)
from cardcatalog.models.sort import SORT_KEYS, SortDirection, SortField, SortSpec

__all__ = [
    "SORT_KEYS",
    "Card",
    "CatalogDecodeError",
    "DataUnavailableError",
    "FailureDetail",
    "FailureKind",
    "ImageUris",
    "KnownError",
    "Prices",
    "SortDirection",
    "SortField",
    "SortSpec",
]
