"""
Configuration loader — locates the project and reads its setup settings.

The project root is the nearest directory holding ``composer.json`` or
``artisan``. Settings come from an optional ``starter-setup.yml`` there,
validated against the SetupSettings schema.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from kitsetup.core.models.settings import SetupSettings

logger = logging.getLogger(__name__)

SETTINGS_FILE = "starter-setup.yml"

# Any of these marks a directory as the application root.
ROOT_MARKERS = ("composer.json", "artisan")


class ConfigError(Exception):
    """Raised when the project root or its settings cannot be resolved."""


def find_project_root(start_dir: Path | None = None) -> Path | None:
    """Walk up from ``start_dir`` (default: cwd) to the first directory with a root marker.

    Returns:
        The resolved project root, or None if no ancestor qualifies.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        if any((current / marker).is_file() for marker in ROOT_MARKERS):
            return current
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def resolve_project_root(explicit: Path | None = None) -> Path:
    """Return the project root or raise ConfigError.

    An explicit path must be an existing directory; it is not required
    to carry a root marker.
    """
    if explicit is not None:
        if not explicit.is_dir():
            raise ConfigError(f"Project root is not a directory: {explicit}")
        return explicit.resolve()

    root = find_project_root()
    if root is None:
        raise ConfigError(
            f"No project root found (looked for {' or '.join(ROOT_MARKERS)} "
            f"from {Path.cwd()} upwards). Run inside the application or pass --project-root."
        )
    return root


def load_settings(project_root: Path) -> SetupSettings:
    """Load ``starter-setup.yml`` from the project root.

    Returns:
        Validated settings; defaults when the file does not exist.

    Raises:
        ConfigError: If the file cannot be read or is invalid.
    """
    path = project_root / SETTINGS_FILE
    if not path.is_file():
        logger.debug("No %s in %s, using defaults", SETTINGS_FILE, project_root)
        return SetupSettings()

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return SetupSettings()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = SetupSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid setup settings in {path}: {e}") from e

    logger.info("Loaded setup settings from %s", path)
    return settings
