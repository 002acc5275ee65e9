# Path: config/settings.py
# Purpose: Provide typed application configuration models.
# Layer: config.
# Details: Centralizes settings for the search engine, the entity snapshot path, and logging.

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchSettings(BaseModel):
    """Settings controlling how queries are matched and how many results are shown."""

    result_limit: int = Field(default=5, ge=0, description="Maximum number of results returned per entity kind.")
    min_query_length: int = Field(
        default=2,
        ge=0,
        description="Raw query length below which matching is suppressed.",
    )


class AppSettings(BaseSettings):
    """Top-level application settings shared across services and interfaces.

    Environment overrides use the ``CRM_SEARCH_`` prefix; nested search settings
    use ``__``, e.g. ``CRM_SEARCH_SEARCH__RESULT_LIMIT``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CRM_SEARCH_",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    data_path: Path = Field(default=Path("storage/crm.json"), description="JSON snapshot with deals and contacts.")
    search: SearchSettings = Field(default_factory=SearchSettings)
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Instantiate settings from ``CRM_SEARCH_*`` environment variables when available."""

        return cls()


__all__ = ["AppSettings", "SearchSettings"]
