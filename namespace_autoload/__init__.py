"""Namespace-prefix autoloader.

Maps fully-qualified dotted names onto source files in registered base
directories, trying the most specific namespace prefix first, and loads the
first match.
"""

from .bootstrap import Autoloader
from .bootstrap import build_registry
from .bootstrap import create_autoloader
from .config import AutoloadSettings
from .config import NamespaceEntry
from .config import SettingsManager
from .config import load_settings_file
from .errors import AutoloadError
from .errors import RegistrationError
from .errors import SettingsError
from .errors import UnitLoadError
from .hook import NamespaceImportHook
from .loaders import Loader
from .loaders import ModuleFileLoader
from .logging_setup import JsonlHandler
from .logging_setup import init_json_logging
from .mapping import map_to_relative_path
from .registry import NamespaceRegistry
from .resolver import NamespaceResolver

__all__ = [
    "Autoloader",
    "AutoloadError",
    "AutoloadSettings",
    "JsonlHandler",
    "Loader",
    "ModuleFileLoader",
    "NamespaceEntry",
    "NamespaceImportHook",
    "NamespaceRegistry",
    "NamespaceResolver",
    "RegistrationError",
    "SettingsError",
    "SettingsManager",
    "UnitLoadError",
    "build_registry",
    "create_autoloader",
    "init_json_logging",
    "load_settings_file",
    "map_to_relative_path",
]
