import copy
import json
import logging
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .errors import ConfigurationMissing, InvalidCapabilityType, InvalidConfigurationValue

# Define project root relative to this file's location (src/seleniumrun/core/config_loader.py)
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / 'config'
DEFAULT_SETTINGS_FILE = CONFIG_DIR / 'settings.json'

TRUE_VALUES = ('true', 'yes', 'y', 'on', '1')

logger = logging.getLogger(__name__)

_MISSING = object()


def config_value_type(value: Any) -> str:
    """Classifies a raw configuration value: string, boolean, number, string-list or the Python type name."""
    if isinstance(value, str):
        return 'string'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, (int, float)):
        return 'number'
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return 'string-list'
    return type(value).__name__


def require_string(category: str, name: str, value: Any) -> str:
    """Returns the string variant of a configuration value or raises InvalidCapabilityType."""
    if not isinstance(value, str):
        raise InvalidCapabilityType(category, name, config_value_type(value))
    return value


def is_value_true(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUE_VALUES


class RunConfiguration:
    """
    Read-only run options addressed by (category, name).

    Settings are a JSON object of categories, each an object of named values:

        {"Selenium": {"Browser": "chrome", "Host": "localhost"},
         "Debug": {"TakeScreenshot": "false"}}
    """

    def __init__(self, settings: Optional[Mapping[str, Mapping[str, Any]]] = None,
                 settings_file: Union[str, Path, None] = None):
        """
        Args:
            settings: Categories mapping to use directly. Takes precedence over settings_file.
            settings_file: Path to a settings JSON file. Defaults to 'config/settings.json'
                when neither argument is given.
        """
        self.settings_file: Optional[Path] = None
        if settings is None:
            self.settings_file = Path(settings_file) if settings_file is not None else DEFAULT_SETTINGS_FILE
            loaded = self._load_json(self.settings_file)
            if not loaded:
                logger.warning(f"Settings file '{self.settings_file}' was not found or is empty/invalid. Using empty settings.")
            settings = loaded
        self._settings: Dict[str, Dict[str, Any]] = {
            str(category): dict(values) for category, values in settings.items() if isinstance(values, Mapping)
        }

    def _load_json(self, file_path: Path) -> Dict[str, Any]:
        if not file_path.exists():
            logger.error(f"Configuration file not found: {file_path}")
            return {}
        if not file_path.is_file():
            logger.error(f"Configuration path is not a file: {file_path}")
            return {}
        try:
            with file_path.open('r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Could not decode JSON from {file_path}: {e}")
            return {}
        except OSError as e:
            logger.error(f"An unexpected error occurred while loading {file_path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Configuration file {file_path} must contain a JSON object of categories")
            return {}
        logger.debug(f"Successfully loaded JSON from {file_path}")
        return data

    def with_overrides(self, overrides: Mapping[str, Mapping[str, Any]]) -> 'RunConfiguration':
        """Returns a new configuration with the given (category, name) values layered on top."""
        merged = copy.deepcopy(self._settings)
        for category, values in overrides.items():
            merged.setdefault(category, {}).update(values)
        return RunConfiguration(settings=merged)

    def has_category(self, category: str) -> bool:
        return category in self._settings

    def get_category(self, category: str) -> Dict[str, Any]:
        if category not in self._settings:
            raise ConfigurationMissing(category)
        return dict(self._settings[category])

    def try_get_item(self, category: str, name: str) -> Tuple[bool, Any]:
        value = self._settings.get(category, {}).get(name, _MISSING)
        if value is _MISSING:
            return False, None
        return True, value

    def get_item(self, category: str, name: str) -> Any:
        found, value = self.try_get_item(category, name)
        if not found:
            raise ConfigurationMissing(category, name)
        return value

    def get_item_or_default(self, category: str, name: str, default: Any = None) -> Any:
        found, value = self.try_get_item(category, name)
        if not found:
            logger.debug(f"Setting [{category}.{name}] not found. Returning default: {default}")
            return default
        return value

    def get_string(self, category: str, name: str, default: Any = _MISSING) -> Optional[str]:
        value = self._get(category, name, default)
        return None if value is None else str(value)

    def get_bool(self, category: str, name: str, default: Any = _MISSING) -> bool:
        return is_value_true(self._get(category, name, default))

    def get_int(self, category: str, name: str, default: Any = _MISSING) -> int:
        value = self._get(category, name, default)
        try:
            return int(float(value))
        except (TypeError, ValueError) as e:
            raise InvalidConfigurationValue(category, name, value, "a whole number") from e

    def get_duration(self, category: str, name: str, default: Any = _MISSING) -> timedelta:
        """Reads a duration given in milliseconds."""
        value = self._get(category, name, default)
        if isinstance(value, timedelta):
            return value
        if isinstance(value, bool):
            raise InvalidConfigurationValue(category, name, value, "a number of milliseconds")
        try:
            return timedelta(milliseconds=float(value))
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidConfigurationValue(category, name, value, "a number of milliseconds") from e

    def get_positive_duration(self, category: str, name: str, default: Any = _MISSING) -> timedelta:
        duration = self.get_duration(category, name, default)
        if duration <= timedelta(0):
            raise InvalidConfigurationValue(category, name, self._get(category, name, default),
                                            "a positive number of milliseconds")
        return duration

    def get_string_list(self, category: str, name: str, default: Any = _MISSING) -> Optional[List[str]]:
        value = self._get(category, name, default)
        if value is None:
            return None
        if isinstance(value, str):
            return value.split()
        if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
            return list(value)
        raise InvalidConfigurationValue(category, name, value, "a string or a list of strings")

    def _get(self, category: str, name: str, default: Any) -> Any:
        if default is _MISSING:
            return self.get_item(category, name)
        return self.get_item_or_default(category, name, default)
