"""Configuration manager: load/save YAML config with defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from lexicology.utils.constants import (
    BUNDLED_WORDS_PATH,
    DEFAULT_CONFIG_PATH,
    DEFAULT_TIMEOUT_SEC,
    LEARNING_PROGRESS_PATH,
    MW_API_KEY_ENV,
    MW_BASE_URL,
    USER_DATA_DIR,
    WORD_OF_THE_DAY_EPOCH,
    WORD_SERVER_URL,
)
from lexicology.utils.exceptions import ConfigurationError
from lexicology.utils.logging_config import get_logger

logger = get_logger("config.settings")


@dataclass
class ApiConfig:
    base_url: str = MW_BASE_URL
    api_key: str = ""
    timeout: float = DEFAULT_TIMEOUT_SEC


@dataclass
class ServerConfig:
    base_url: str = WORD_SERVER_URL
    timeout: float = DEFAULT_TIMEOUT_SEC


@dataclass
class WordOfTheDayConfig:
    epoch: date = WORD_OF_THE_DAY_EPOCH


@dataclass
class StorageConfig:
    word_list_path: str = str(BUNDLED_WORDS_PATH)
    progress_path: str = str(LEARNING_PROGRESS_PATH)


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppSettings:
    """Top-level application settings."""

    api: ApiConfig = field(default_factory=ApiConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    word_of_the_day: WordOfTheDayConfig = field(default_factory=WordOfTheDayConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class SettingsManager:
    """Singleton configuration manager for the application shell.

    Loads settings from YAML files, merging with defaults, then applies the
    ``MW_API_KEY`` environment override. Persists user overrides to
    ``~/.lexicology/config.yaml``. Core components receive the resulting
    dataclasses through their constructors.
    """

    _instance: SettingsManager | None = None

    def __new__(cls, *args: Any, **kwargs: Any) -> SettingsManager:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, user_config_path: Path | None = None) -> None:
        if hasattr(self, "_initialized") and self._initialized:
            return
        self._settings = AppSettings()
        self._user_config_path = user_config_path or (USER_DATA_DIR / "config.yaml")
        self._initialized = True

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def load(self, default_path: Path | None = None) -> AppSettings:
        """Load settings from default config, then overlay user config.

        Returns:
            Merged :class:`AppSettings`.
        """
        self._settings = AppSettings()

        default_path = default_path or DEFAULT_CONFIG_PATH
        if default_path.exists():
            self._merge_from_yaml(default_path)

        if self._user_config_path.exists():
            self._merge_from_yaml(self._user_config_path)

        env_key = os.environ.get(MW_API_KEY_ENV)
        if env_key:
            self._settings.api.api_key = env_key

        logger.info(
            "Settings loaded (api=%s, key=%s, server=%s)",
            self._settings.api.base_url,
            "set" if self._settings.api.api_key else "missing",
            self._settings.server.base_url,
        )
        return self._settings

    def save(self) -> None:
        """Persist current settings to user config file."""
        try:
            self._user_config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._user_config_path, "w", encoding="utf-8") as fh:
                yaml.dump(self._to_dict(), fh, default_flow_style=False, sort_keys=False)
            logger.info("Settings saved to %s", self._user_config_path)
        except OSError as exc:
            raise ConfigurationError(f"Failed to save settings: {exc}") from exc

    def _merge_from_yaml(self, path: Path) -> None:
        """Merge settings from a YAML file into current settings."""
        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Could not load config from %s: %s", path, exc)
            return

        if not isinstance(data, dict):
            return

        s = self._settings

        api = data.get("api")
        if isinstance(api, dict):
            s.api.base_url = api.get("base_url", s.api.base_url)
            s.api.api_key = api.get("api_key", s.api.api_key) or ""
            s.api.timeout = float(api.get("timeout", s.api.timeout))

        server = data.get("server")
        if isinstance(server, dict):
            s.server.base_url = server.get("base_url", s.server.base_url)
            s.server.timeout = float(server.get("timeout", s.server.timeout))

        wotd = data.get("word_of_the_day")
        if isinstance(wotd, dict) and "epoch" in wotd:
            s.word_of_the_day.epoch = self._parse_epoch(wotd["epoch"])

        storage = data.get("storage")
        if isinstance(storage, dict):
            s.storage.word_list_path = storage.get("word_list_path") or s.storage.word_list_path
            s.storage.progress_path = storage.get("progress_path") or s.storage.progress_path

        lg = data.get("logging")
        if isinstance(lg, dict):
            s.logging.level = lg.get("level", s.logging.level)

    @staticmethod
    def _parse_epoch(value: Any) -> date:
        # PyYAML already turns unquoted YYYY-MM-DD into a date
        if isinstance(value, date):
            return value
        try:
            return date.fromisoformat(str(value))
        except ValueError as exc:
            raise ConfigurationError(f"Invalid word_of_the_day.epoch: {value!r}") from exc

    def _to_dict(self) -> dict[str, Any]:
        s = self._settings
        return {
            "api": {
                "base_url": s.api.base_url,
                "api_key": s.api.api_key,
                "timeout": s.api.timeout,
            },
            "server": {
                "base_url": s.server.base_url,
                "timeout": s.server.timeout,
            },
            "word_of_the_day": {"epoch": s.word_of_the_day.epoch.isoformat()},
            "storage": {
                "word_list_path": s.storage.word_list_path,
                "progress_path": s.storage.progress_path,
            },
            "logging": {"level": s.logging.level},
        }
