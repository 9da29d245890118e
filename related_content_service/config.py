"""Application configuration"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10

# Extension setting -> environment / local.settings.json key
EXTENSION_SETTINGS = {
    'limit': 'RELATED_CONTENT_LIMIT',
    'manual_related_content_field': 'RELATED_CONTENT_MANUAL_FIELD',
    'manual_related_content_field_type': 'RELATED_CONTENT_MANUAL_FIELD_TYPE',
    'contenttypes': 'RELATED_CONTENT_CONTENTTYPES',
    'taxonomies': 'RELATED_CONTENT_TAXONOMIES',
    'fields': 'RELATED_CONTENT_FIELDS',
}
LIST_SETTINGS = ('contenttypes', 'taxonomies', 'fields')


def _get_config_value(key: str, default: str | None = None) -> str | None:
    """
    Get configuration value from environment or local.settings.json.

    Priority:
    1. Environment variable
    2. local.settings.json (Values.key)
    3. Default value

    Args:
        key: Configuration key name
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # Try environment variable first
    value = os.getenv(key)
    if value:
        return value

    # Try local.settings.json
    project_root = Path(__file__).resolve().parent.parent
    local_settings_path = project_root / "local.settings.json"

    if local_settings_path.exists():
        try:
            with open(local_settings_path) as f:
                settings = json.load(f)
                value = settings.get("Values", {}).get(key)
                if value:
                    return value
        except (json.JSONDecodeError, KeyError):
            pass

    # Return default
    return default


def get_content_api_url() -> str | None:
    """
    Get the base URL of the CMS content API.

    Returns:
        Content API URL
    """
    return _get_config_value("CONTENT_API_URL", default="http://localhost:7071/api")


def get_content_api_timeout() -> float:
    """
    Get the request timeout for the content API in seconds.

    Returns:
        Timeout (default: 10)
    """
    value = _get_config_value("CONTENT_API_TIMEOUT", default="10")
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid CONTENT_API_TIMEOUT {value!r}, using 10")
        return 10.0


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(',') if item.strip()]


def get_extension_defaults() -> Dict[str, Any]:
    """
    Read the related content defaults from environment or local.settings.json.

    List settings are comma separated. Settings that are not configured are
    left out so that they resolve to their built-in defaults.

    Returns:
        Dict of extension settings
    """
    defaults: Dict[str, Any] = {}
    for setting, env_key in EXTENSION_SETTINGS.items():
        value = _get_config_value(env_key)
        if value is None:
            continue
        defaults[setting] = _split_list(value) if setting in LIST_SETTINGS else value
    return defaults


class ExtensionConfig:
    """
    Global extension configuration, overridable per request.
    """

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self.values = dict(values or {})

    @classmethod
    def from_environment(cls) -> 'ExtensionConfig':
        return cls(get_extension_defaults())

    def get_config(self, key: str, default: Any = None) -> Any:
        """Global value for a key."""
        value = self.values.get(key)
        return default if value is None else value

    def get_value(self, key: str, options: Optional[Dict[str, Any]] = None, default: Any = None) -> Any:
        """Request option when given, otherwise the global value."""
        if options and options.get(key) is not None:
            return options[key]
        return self.get_config(key, default)


def _coerce_limit(value: Any) -> int:
    if value is None:
        logger.warning(f"No related content limit configured, using {DEFAULT_LIMIT}")
        return DEFAULT_LIMIT
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid related content limit {value!r}, using {DEFAULT_LIMIT}")
        return DEFAULT_LIMIT


def _coerce_list(value: Any) -> Optional[Tuple[str, ...]]:
    if value is None:
        return None
    if isinstance(value, str):
        return tuple(_split_list(value))
    if isinstance(value, (list, tuple, set)):
        return tuple(str(item) for item in value)
    return None


@dataclass(frozen=True)
class RelatedContentSettings:
    """
    Settings for a single related content request.

    ``taxonomies`` is None when every taxonomy may be compared and an empty
    tuple when none may. ``contenttypes`` and ``fields`` treat None and empty
    alike.
    """
    limit: int = DEFAULT_LIMIT
    manual_field: Optional[str] = None
    manual_field_type: Optional[str] = None
    contenttypes: Optional[Tuple[str, ...]] = None
    taxonomies: Optional[Tuple[str, ...]] = None
    fields: Optional[Tuple[str, ...]] = None

    @classmethod
    def resolve(cls, config: ExtensionConfig, options: Optional[Dict[str, Any]] = None) -> 'RelatedContentSettings':
        """
        Merge request options over the global configuration.

        Args:
            config: Global extension configuration
            options: Per-request overrides

        Returns:
            RelatedContentSettings
        """
        manual_field = config.get_value('manual_related_content_field', options)
        manual_field_type = config.get_value('manual_related_content_field_type', options)

        return cls(
            limit=_coerce_limit(config.get_value('limit', options)),
            manual_field=str(manual_field) if manual_field else None,
            manual_field_type=str(manual_field_type).lower() if manual_field_type else None,
            contenttypes=_coerce_list(config.get_value('contenttypes', options)),
            taxonomies=_coerce_list(config.get_value('taxonomies', options)),
            fields=_coerce_list(config.get_value('fields', options)),
        )
