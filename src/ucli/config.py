"""Configuration file discovery and loading.

The configuration is a small YAML document read once at startup::

    url: https://api.example.com/v1
    token: ~/.config/example/token      # bearer token file, wins over basic auth
    username: alice                      # basic auth, used only without a token
    password: s3cret
    headers:
      X-Client: ucli

Without ``--config`` the file is looked up as ``configuration.yaml`` (then
``configuration.yml``) in the current working directory. Because YAML is a
superset of JSON, an explicit ``--config settings.json`` works too.

Every failure -- missing file, unreadable file, malformed YAML, wrong
shape -- is raised as :class:`~ucli.exceptions.ConfigError`.
"""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from ucli.exceptions import ConfigError
from ucli.models import Configuration

_APP_NAME = "ucli"
_CONFIG_NAME = "configuration"
_CONFIG_SUFFIXES = (".yaml", ".yml")


def find_config_file(explicit: Optional[str] = None) -> Path:
    """Return the configuration file to load.

    Args:
        explicit: Path given with ``--config``. Used as-is (after ``~``
            expansion) without checking that it exists.

    Returns:
        The path of the configuration file.

    Raises:
        ConfigError: If no explicit path was given and no default file
            exists in the working directory.
    """
    if explicit:
        return Path(explicit).expanduser()

    cwd = Path.cwd()
    for suffix in _CONFIG_SUFFIXES:
        candidate = cwd / f"{_CONFIG_NAME}{suffix}"
        if candidate.is_file():
            return candidate

    raise ConfigError(
        f'Error loading configuration: Config File "{_CONFIG_NAME}" Not Found in "{cwd}"'
    )


def load_config(path: Optional[str] = None) -> tuple[Configuration, Path]:
    """Locate, parse, and validate the configuration file.

    Args:
        path: Optional explicit file path (from ``--config``).

    Returns:
        A tuple of ``(configuration, path_used)``.

    Raises:
        ConfigError: If the file cannot be found, read, parsed, or validated.
    """
    config_path = find_config_file(path)

    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Error loading configuration: {exc}") from exc

    data = _parse_content(text, config_path)
    try:
        return Configuration.model_validate(data), config_path
    except ValidationError as exc:
        raise ConfigError(
            f"Error loading configuration: invalid settings in {config_path}: {exc}"
        ) from exc


def _parse_content(text: str, path: Path) -> dict[str, Any]:
    """Parse YAML text into a mapping; an empty document yields ``{}``."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Error loading configuration: {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Error loading configuration: {path} must contain a mapping at the top level, "
            f"got {type(data).__name__}"
        )
    return data


# --- User data directory ---


def _is_xdg_platform() -> bool:
    """Return True if the platform follows the XDG Base Directory spec (Linux/BSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_data_dir() -> Path:
    """Return the data directory used for crash logs, creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/ucli/`` (default ``~/.local/share/ucli/``).
    On macOS/Windows: ``~/.ucli/``.
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_DATA_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".local" / "share"
        path = base / _APP_NAME
    else:
        path = Path.home() / f".{_APP_NAME}"
    path.mkdir(parents=True, exist_ok=True)
    return path
