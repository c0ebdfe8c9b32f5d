"""Settings persistence: locate and load the JSON settings file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from etcdview.constants.defaults import SETTINGS_ENV_VAR, SETTINGS_PATH_DEFAULT
from etcdview.models.state.app_settings import AppSettings, ConfigLoadError

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads ``AppSettings`` from disk."""

    @staticmethod
    def settings_path() -> Path:
        """Return the settings file path, honoring ``$ETCDVIEW_CONFIG``."""
        override = os.environ.get(SETTINGS_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return SETTINGS_PATH_DEFAULT

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings, falling back to defaults when no file exists.

        Raises:
            ConfigLoadError: The file exists but cannot be read or validated.
        """
        settings_file = path if path is not None else cls.settings_path()
        if not settings_file.exists():
            logger.debug("No settings file at %s, using defaults", settings_file)
            return AppSettings()

        try:
            raw = settings_file.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigLoadError(f"Cannot read settings file {settings_file}: {exc}") from exc

        try:
            settings = AppSettings.model_validate_json(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings file {settings_file}: {exc}") from exc

        logger.debug("Loaded settings from %s", settings_file)
        return settings
