from pathlib import Path

import pytest

from cardcatalog.config import Settings, settings
from cardcatalog.models.failure import DataUnavailableError, FailureKind
from cardcatalog.parsers.scryfall import parse_catalog
from cardcatalog.services.bundle import load_catalog_json, resource_path


class TestLoadCatalogJson:
    def test_reads_bytes(self, catalog_dir: Path, catalog_bytes: bytes) -> None:
        assert load_catalog_json("test-catalog", catalog_dir) == catalog_bytes

    def test_missing_resource_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DataUnavailableError) as exc_info:
            load_catalog_json("nonexistent", tmp_path)

        assert exc_info.value.kind == FailureKind.NOT_FOUND
        assert exc_info.value.resource_name == "nonexistent"

    def test_directory_is_not_a_resource(self, tmp_path: Path) -> None:
        (tmp_path / "folder.json").mkdir()

        with pytest.raises(DataUnavailableError):
            load_catalog_json("folder", tmp_path)

    def test_resource_path_adds_extension(self, tmp_path: Path) -> None:
        assert resource_path("WOT-Scryfall", tmp_path) == tmp_path / "WOT-Scryfall.json"


class TestBundledSnapshot:
    def test_default_settings(self) -> None:
        defaults = Settings()

        assert defaults.catalog_resource == "WOT-Scryfall"
        assert defaults.page_size == 45

    def test_bundled_snapshot_decodes(self) -> None:
        """The snapshot shipped with the package is a valid catalog."""
        cards = parse_catalog(load_catalog_json(settings.catalog_resource))

        assert cards
        assert len({c.id for c in cards}) == len(cards)
        assert all(c.set_code == "wot" for c in cards)
