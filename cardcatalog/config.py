from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CARDCATALOG_")

    app_name: str = "Card Catalog"
    debug: bool = False

    # Directory holding bundled catalog snapshots
    data_dir: Path = Path(__file__).parent / "data"

    # Bundled snapshot name, without the .json extension
    catalog_resource: str = "WOT-Scryfall"

    # Records appended to the visible set per "load more"
    page_size: int = 45


settings = Settings()
