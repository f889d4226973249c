"""
Search defaults persisted as JSON in the user's config directory.
"""
import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from searchlight.core.search.models import SearchOptions
from searchlight.exceptions import InvalidOptionsError

from .resource_loader import get_config_dir

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME = "search.json"


@dataclass(frozen=True)
class SearchSettings:
    """Default search options plus the class names given to marks."""

    options: SearchOptions = field(default_factory=SearchOptions)
    highlight_class: str = "highlight"
    active_class: str = "active"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'options': self.options.to_dict(),
            'highlight_class': self.highlight_class,
            'active_class': self.active_class,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchSettings":
        """
        Build settings from a decoded JSON object.

        Raises:
            InvalidOptionsError: If an option key or value is invalid
        """
        defaults = cls()
        for key in data:
            if key not in ('options', 'highlight_class', 'active_class'):
                logger.warning("Ignoring unknown settings key '%s'", key)

        options = data.get('options') or {}
        if not isinstance(options, dict):
            raise InvalidOptionsError("Settings 'options' must be an object")

        return cls(
            options=SearchOptions.from_dict(options),
            highlight_class=str(data.get('highlight_class', defaults.highlight_class)),
            active_class=str(data.get('active_class', defaults.active_class)),
        )


def get_settings_path() -> str:
    """Default location of the settings file."""
    return os.path.join(str(get_config_dir()), SETTINGS_FILE_NAME)


def load_settings(file_path: Optional[Union[str, os.PathLike]] = None) -> SearchSettings:
    """
    Load search settings from JSON.

    A missing or unreadable file yields the defaults.

    Args:
        file_path: Optional custom path for the JSON file

    Returns:
        Loaded settings

    Raises:
        InvalidOptionsError: If the file holds invalid option values
    """
    if file_path is None:
        file_path = get_settings_path()

    if not os.path.exists(file_path):
        return SearchSettings()

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Failed to read settings from %s: %s", file_path, e)
        return SearchSettings()

    if not isinstance(data, dict):
        logger.warning("Settings file %s does not hold an object", file_path)
        return SearchSettings()

    return SearchSettings.from_dict(data)


def save_settings(settings: SearchSettings,
                  file_path: Optional[Union[str, os.PathLike]] = None) -> bool:
    """
    Save search settings to JSON.

    Args:
        settings: Settings to write
        file_path: Optional custom path for the JSON file

    Returns:
        True if save was successful
    """
    if file_path is None:
        file_path = get_settings_path()

    try:
        directory = os.path.dirname(os.fspath(file_path))
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(settings.to_dict(), f, indent=2)
        return True
    except OSError as e:
        logger.error("Failed to save settings to %s: %s", file_path, e)
        return False
