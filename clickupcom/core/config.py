"""CLI configuration: environment settings and the on-disk key/value store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Keys recognised by the store
API_KEY = "apiKey"
BASE_URL = "baseUrl"

MASK = "*" * 16


class CLISettings(BaseSettings):
    """Process settings read from ``CLICKUPCOM_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CLICKUPCOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    config_dir: Path = Field(default_factory=lambda: Path.home() / ".clickupcom")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @property
    def config_file(self) -> Path:
        return self.config_dir / ConfigStore.FILENAME


# Global settings instance
_settings: Optional[CLISettings] = None


def get_settings() -> CLISettings:
    """Get or create the global settings."""
    global _settings
    if _settings is None:
        _settings = CLISettings()
    return _settings


class ConfigStore:
    """Flat JSON key/value store holding the user's CLI configuration.

    Values are only read from disk by :meth:`load` and only written by
    :meth:`save` (which :meth:`set` calls straight away). The store is
    created once per process and handed to the API clients and commands.
    """

    FILENAME = "config.json"

    def __init__(self, path: Path):
        self.path = Path(path)
        self._values: dict[str, str] = {}

    @classmethod
    def from_settings(cls, settings: CLISettings | None = None) -> "ConfigStore":
        """Create a store at the configured location and load it."""
        settings = settings or get_settings()
        return cls(settings.config_file).load()

    def load(self) -> "ConfigStore":
        """(Re)read values from disk. A missing or corrupt file is empty."""
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raw = {}
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config file %s: %s", self.path, e)
            raw = {}

        if not isinstance(raw, dict):
            raw = {}
        self._values = {str(k): v for k, v in raw.items() if isinstance(v, str)}
        return self

    def save(self) -> None:
        """Write all values to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._values, indent=2) + "\n", encoding="utf-8")

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set a value and persist it immediately."""
        self._values[key] = value
        self.save()

    def is_configured(self) -> bool:
        """True when an API key is stored."""
        return bool(self.get(API_KEY))

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)


def mask_secret(value: Optional[str]) -> Optional[str]:
    """Fixed-length mask for a stored secret, or None when unset."""
    return MASK if value else None
