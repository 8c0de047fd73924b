"""Logic for loading configuration files and merging them with defaults."""

from pathlib import Path
from typing import Any

import yaml

from php_autodoc.errors import ConfigurationError

DEFAULT_CONFIG: dict[str, Any] = {
    "output_path": "docs",
    "source_directories": ["app"],
    "excluded_directories": [
        "vendor",
        "node_modules",
        "storage",
        "bootstrap/cache",
        "public",
    ],
    "file_extensions": ["php"],
    "include_protected_methods": False,
    "include_private_methods": False,
    "title": "PHP Documentation",
}

CONFIG_FILE_NAMES = ("autodoc.yml", "autodoc.yaml", "autodoc.json")

# Command-line values for these keys extend the configured lists.
ADDITIVE_KEYS = ("source_directories", "excluded_directories")


def find_config_file(project_root: Path) -> Path | None:
    """Return the first project configuration file present in ``project_root``."""
    for name in CONFIG_FILE_NAMES:
        candidate = project_root / name
        if candidate.is_file():
            return candidate
    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """Read a YAML (or JSON) configuration mapping."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        msg = f"Failed to read configuration file {path}: {e}"
        raise ConfigurationError(msg) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Configuration file {path} must contain a mapping of settings"
        raise ConfigurationError(msg)
    return data


def load_config(
    path: str | None = None,
    overrides: dict[str, Any] | None = None,
    project_root: Path | None = None,
) -> dict[str, Any]:
    """Load configuration and merge it with defaults.

    Without an explicit ``path`` the project root is searched for an
    ``autodoc.yml`` / ``autodoc.json`` file. ``overrides`` (command-line
    values) are applied last.
    """
    config = {
        k: list(v) if isinstance(v, list) else v for k, v in DEFAULT_CONFIG.items()
    }

    config_file = Path(path) if path else find_config_file(project_root or Path.cwd())
    if path and not config_file.is_file():
        msg = f"Configuration file not found: {path}"
        raise ConfigurationError(msg)
    if config_file is not None:
        config.update(read_config_file(config_file))

    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key in ADDITIVE_KEYS and isinstance(config.get(key), list):
            config[key] = [*config[key], *value]
        else:
            config[key] = value
    return config
