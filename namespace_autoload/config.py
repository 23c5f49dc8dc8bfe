"""Autoload settings from layered settings.yaml files.

Scopes, highest precedence first:
- Override file named by NAMESPACE_AUTOLOAD_SETTINGS
- Local (.namespace-autoload/settings.local.yaml)
- Project (.namespace-autoload/settings.yaml)
- User (~/.namespace-autoload/settings.yaml)

Example::

    autoload:
      separator: "."
      extension: ".py"
      namespaces:
        - prefix: Foo.Bar
          dirs: [src, tests]
        - prefix: Foo.Bar
          dirs: [overrides]
          prepend: true
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

from .errors import SettingsError
from .mapping import DEFAULT_EXTENSION
from .mapping import DEFAULT_SEPARATOR

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "NAMESPACE_AUTOLOAD_SETTINGS"
SETTINGS_DIR_NAME = ".namespace-autoload"


class NamespaceEntry(BaseModel):
    """Base directories registered for one namespace prefix."""

    prefix: str = Field(..., min_length=1, description="Namespace prefix (separator alone for the root)")
    dirs: list[str] = Field(..., min_length=1, description="Base directories, in search order")
    prepend: bool = Field(default=False, description="Search these directories before earlier registrations")

    @field_validator("dirs")
    @classmethod
    def _dirs_not_empty(cls, dirs: list[str]) -> list[str]:
        if any(not d for d in dirs):
            raise ValueError("base directories must not be empty strings")
        return dirs


class AutoloadSettings(BaseModel):
    """Complete autoloader configuration."""

    separator: str = Field(default=DEFAULT_SEPARATOR, min_length=1, description="Namespace separator")
    extension: str = Field(default=DEFAULT_EXTENSION, description="Source-unit file extension")
    namespaces: list[NamespaceEntry] = Field(default_factory=list, description="Registrations in order")

    @field_validator("extension")
    @classmethod
    def _extension_has_dot(cls, extension: str) -> str:
        if not extension.startswith(".") or len(extension) < 2:
            raise ValueError(f"extension must look like '.ext', got '{extension}'")
        return extension


def _anchor_dirs(entries: list[NamespaceEntry], base: Path) -> list[NamespaceEntry]:
    """Resolve relative base directories against the declaring file's directory."""
    anchored = []
    for entry in entries:
        dirs = []
        for d in entry.dirs:
            directory = Path(d).expanduser()
            dirs.append(str(directory if directory.is_absolute() else base / directory))
        anchored.append(entry.model_copy(update={"dirs": dirs}))
    return anchored


def _read_section(path: Path) -> dict[str, Any] | None:
    """Read the ``autoload`` section of a settings file.

    Returns:
        Section dict, or None if the file doesn't exist

    Raises:
        SettingsError: File is unreadable or not valid YAML
    """
    if not path.exists():
        return None

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise SettingsError(f"Failed to read settings from {path}: {e}") from e

    if not data:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must contain a mapping")

    section = data.get("autoload") or {}
    if not isinstance(section, dict):
        raise SettingsError(f"'autoload' section in {path} must be a mapping")
    return section


def load_settings_file(path: str | Path) -> AutoloadSettings:
    """Load and validate a single settings file.

    Relative base directories are anchored at the file's directory. A missing
    file yields default settings.

    Raises:
        SettingsError: File is malformed or fails validation
    """
    path = Path(path)
    section = _read_section(path)
    if section is None:
        logger.debug(f"Settings file not found: {path}")
        return AutoloadSettings()
    return _validate_section(section, path)


def _validate_section(section: dict[str, Any], path: Path) -> AutoloadSettings:
    try:
        settings = AutoloadSettings.model_validate(section)
    except ValidationError as e:
        raise SettingsError(f"Invalid autoload settings in {path}:\n{e}") from e

    return settings.model_copy(update={"namespaces": _anchor_dirs(settings.namespaces, path.parent.resolve())})


class SettingsManager:
    """Merges autoload settings across override/local/project/user scopes."""

    def __init__(self, config_dir: Path | None = None, user_dir: Path | None = None):
        """Initialize settings manager with standard paths.

        Args:
            config_dir: Directory holding project/local settings (for testing).
                        If None, uses .namespace-autoload in current directory.
            user_dir: Directory holding user settings (for testing).
                      If None, uses ~/.namespace-autoload.
        """
        if config_dir is None:
            config_dir = Path(SETTINGS_DIR_NAME)
        if user_dir is None:
            user_dir = Path.home() / SETTINGS_DIR_NAME

        self.user_settings_file = user_dir / "settings.yaml"
        self.project_settings_file = config_dir / "settings.yaml"
        self.local_settings_file = config_dir / "settings.local.yaml"

    def settings_files(self) -> list[Path]:
        """Settings files in precedence order (highest first)."""
        files = []
        if override := os.environ.get(SETTINGS_ENV_VAR):
            files.append(Path(override).expanduser())
        files.extend([self.local_settings_file, self.project_settings_file, self.user_settings_file])
        return files

    def load(self) -> AutoloadSettings:
        """Merge every existing scope into one AutoloadSettings.

        Scalars come from the highest-precedence scope that sets them.
        Namespace entries are concatenated highest-precedence first, so
        their directories are searched first.
        """
        scalars: dict[str, Any] = {}
        namespaces: list[NamespaceEntry] = []

        for path in self.settings_files():
            section = _read_section(path)
            if section is None:
                continue

            settings = _validate_section(section, path)
            for key in ("separator", "extension"):
                if key in section and key not in scalars:
                    scalars[key] = getattr(settings, key)
            namespaces.extend(settings.namespaces)
            logger.debug(f"Loaded {len(settings.namespaces)} namespace entries from {path}")

        return AutoloadSettings(**scalars, namespaces=namespaces)
