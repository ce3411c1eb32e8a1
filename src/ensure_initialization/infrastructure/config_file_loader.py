"""Load [tool.ensure-initialization] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

from ensure_initialization.domain.constants import CONFIG_SECTION

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib  # type: ignore[import-not-found]


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml."""

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Return the [tool.ensure-initialization] table of the nearest readable pyproject.toml, or {}."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError) as e:
                logging.warning("Could not read %s: %s", config_file, e)
                continue
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(CONFIG_SECTION, {}) or {}
            return config_dict
        return {}
