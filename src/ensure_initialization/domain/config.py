"""Configuration loader for linter settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from ensure_initialization.domain.constants import (
    DEFAULT_BASE_COMPONENT,
    DEFAULT_FACTORY_NAME,
    DEFAULT_FACTORY_OWNER,
    DEFAULT_MARKER_NAME,
)


class ConfigurationLoader:
    """
    Immutable configuration for the initialization rule.

    Created by Infrastructure from the [tool.ensure-initialization] table. Domain does
    not read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    """

    IDENTITY_KEYS: tuple[str, ...] = (
        "factory_owner",
        "factory_name",
        "base_component",
        "marker_name",
    )

    def __init__(self, config_dict: dict[str, object]) -> None:
        """Set config once at construction. No mutable state after init."""
        self._config = config_dict
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about identity keys that are not non-empty strings; defaults apply."""
        for key in self.IDENTITY_KEYS:
            if key not in config:
                continue
            value = config[key]
            if not isinstance(value, str) or not value.strip():
                logging.warning(
                    "Configuration Warning: '%s' must be a non-empty string, got %r. "
                    "Using the default.", key, value)
        exclude = config.get("exclude_paths", [])
        if not isinstance(exclude, list):
            logging.warning(
                "Configuration Warning: 'exclude_paths' must be a list of strings.")

    def _identity(self, key: str, default: str) -> str:
        raw = self._config.get(key)
        if isinstance(raw, str) and raw.strip():
            return raw.strip()
        return default

    @property
    def factory_owner(self) -> str:
        """Qualified name of the class that owns the factory function."""
        return self._identity("factory_owner", DEFAULT_FACTORY_OWNER)

    @property
    def factory_name(self) -> str:
        """Name of the factory function on the owning class."""
        return self._identity("factory_name", DEFAULT_FACTORY_NAME)

    @property
    def base_component(self) -> str:
        """Qualified name of the base class tracked types must derive from."""
        return self._identity("base_component", DEFAULT_BASE_COMPONENT)

    @property
    def marker_name(self) -> str:
        """Simple name of the class decorator carrying the initialization method."""
        return self._identity("marker_name", DEFAULT_MARKER_NAME)

    @property
    def exclude_paths(self) -> list[str]:
        """
        Path fragments to exclude from `ensure-init check`.

        Intended for fixtures that deliberately skip initialization.
        """
        raw = self._config.get("exclude_paths", [])
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return []
