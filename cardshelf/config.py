from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CARDSHELF_")

    app_name: str = "CardShelf"
    debug: bool = False

    # Locale for labels and collation when a request does not name one
    default_locale: str = "en"

    # Card sort applied inside each group, most significant first
    default_sorting: list[str] = ["name", "level", "position"]

    # Where the CLI job looks for cards.json / metadata.json
    data_dir: Path = Path(__file__).parent.parent / "data"


settings = Settings()
