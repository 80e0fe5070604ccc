"""
Bundled catalog loader.

Reads a catalog snapshot that ships inside the package. The snapshot is
static for the lifetime of the application.
"""

import logging
from pathlib import Path

from cardcatalog.config import settings
from cardcatalog.models.failure import DataUnavailableError

logger = logging.getLogger(__name__)


def resource_path(resource_name: str, data_dir: Path | None = None) -> Path:
    """Resolve a resource name (without extension) to its JSON file path."""
    if data_dir is None:
        data_dir = settings.data_dir
    return data_dir / f"{resource_name}.json"


def load_catalog_json(resource_name: str, data_dir: Path | None = None) -> bytes:
    """
    Read a bundled catalog snapshot.

    Args:
        resource_name: Snapshot name without extension (e.g., "WOT-Scryfall")
        data_dir: Directory to look in. Defaults to settings.data_dir

    Returns:
        Raw JSON bytes.

    Raises:
        DataUnavailableError: If the file is missing or cannot be opened
    """
    path = resource_path(resource_name, data_dir)

    if not path.is_file():
        raise DataUnavailableError(resource_name, detail=f"No file at {path}")

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DataUnavailableError(resource_name, detail=str(e)) from e

    logger.debug("Read %d bytes from %s", len(raw), path)
    return raw
