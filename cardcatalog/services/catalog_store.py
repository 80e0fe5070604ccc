"""
Catalog store.

Owns the full record set loaded from the bundled snapshot and the
pagination cursor over it. One store per catalog screen; nothing here is
module-level state.

Load failures are terminal for that attempt: the store is left empty,
the failure is logged and kept on ``last_failure`` for the presentation
layer. They never propagate.
"""

import logging
from collections.abc import Callable

from cardcatalog.config import settings
from cardcatalog.models.card import Card
from cardcatalog.models.failure import FailureDetail, KnownError
from cardcatalog.models.sort import SortSpec
from cardcatalog.parsers.scryfall import parse_catalog
from cardcatalog.services import query_engine
from cardcatalog.services.bundle import load_catalog_json

logger = logging.getLogger(__name__)

CatalogLoader = Callable[[str], bytes]


class CatalogStore:
    """
    In-memory catalog with incremental pagination.

    Attributes:
        resource_name: Snapshot name passed to the loader
        page_size: Records added to the visible set per page
        last_failure: Failure from the most recent load, None on success
    """

    def __init__(
        self,
        resource_name: str | None = None,
        loader: CatalogLoader = load_catalog_json,
        page_size: int | None = None,
    ) -> None:
        if page_size is None:
            page_size = settings.page_size
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")

        self.resource_name = resource_name or settings.catalog_resource
        self.page_size = page_size
        self.last_failure: FailureDetail | None = None

        self._loader = loader
        self._all_records: list[Card] = []
        self._visible_count = 0
        self._loading = False

    @property
    def total_count(self) -> int:
        """Number of records loaded."""
        return len(self._all_records)

    @property
    def visible_count(self) -> int:
        """Number of records currently materialized into the view."""
        return self._visible_count

    @property
    def has_more(self) -> bool:
        """True if next_page() would reveal more records."""
        return self._visible_count < len(self._all_records)

    @property
    def is_loading(self) -> bool:
        """True while a load() call is running."""
        return self._loading

    def load(self) -> None:
        """
        Load the full record set and reset the view to the first page.

        Reloading replaces the record set. A call made while a load is
        already running on this store is ignored.
        """
        if self._loading:
            logger.debug("Load of %s already in progress, ignoring", self.resource_name)
            return

        self._loading = True
        try:
            records = self._read_records()
        except KnownError as e:
            logger.error(
                "Failed to load card catalog %s: %s (%s)",
                self.resource_name,
                e.message,
                e.detail,
            )
            self._all_records = []
            self._visible_count = 0
            self.last_failure = e.to_detail()
            return
        finally:
            self._loading = False

        self._all_records = records
        self._visible_count = min(self.page_size, len(records))
        self.last_failure = None
        logger.info("Loaded %d cards from %s", len(records), self.resource_name)

    def next_page(self) -> int:
        """
        Reveal the next page of records.

        Returns:
            The visible count after the call. Unchanged when every record
            is already visible.
        """
        self._visible_count = min(self._visible_count + self.page_size, len(self._all_records))
        return self._visible_count

    def visible_records(self) -> list[Card]:
        """First visible_count records in source order, as a new list."""
        return self._all_records[: self._visible_count]

    def query(self, filter_text: str = "", sort: SortSpec | None = None) -> list[Card]:
        """Filter and sort the visible records for display."""
        return query_engine.query(self.visible_records(), filter_text, sort)

    def _read_records(self) -> list[Card]:
        raw = self._loader(self.resource_name)
        cards = parse_catalog(raw)

        # First occurrence of an id wins
        seen: set[str] = set()
        unique: list[Card] = []
        duplicates: list[str] = []
        for card in cards:
            if card.id in seen:
                duplicates.append(card.id)
                continue
            seen.add(card.id)
            unique.append(card)

        if duplicates:
            logger.warning(
                "Catalog %s contains %d duplicate card ids: %s",
                self.resource_name,
                len(duplicates),
                duplicates[:10],
            )

        return unique
