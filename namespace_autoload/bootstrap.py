"""Wire settings, registry, resolver and import hook together.

The caller owns the returned Autoloader; keep one per process by creating it
once at startup and passing it where it is needed.
"""

import logging
from dataclasses import dataclass

from .config import AutoloadSettings
from .config import SettingsManager
from .hook import NamespaceImportHook
from .loaders import Loader
from .logging_setup import init_json_logging
from .registry import NamespaceRegistry
from .resolver import NamespaceResolver

logger = logging.getLogger(__name__)

IMPORT_SEPARATOR = "."


@dataclass
class Autoloader:
    """Registry, resolver and import hook built from one settings object."""

    registry: NamespaceRegistry
    resolver: NamespaceResolver
    hook: NamespaceImportHook

    def add_base_directory(self, prefix: str, base_dir: str, prepend: bool = False) -> None:
        self.registry.add_base_directory(prefix, base_dir, prepend)

    def resolve(self, name: str) -> str | None:
        return self.resolver.resolve(name)

    def close(self) -> None:
        """Remove the import hook from sys.meta_path."""
        self.hook.uninstall()


def build_registry(settings: AutoloadSettings) -> NamespaceRegistry:
    """Register every configured namespace entry, in order."""
    registry = NamespaceRegistry(separator=settings.separator)
    for entry in settings.namespaces:
        dirs = reversed(entry.dirs) if entry.prepend else entry.dirs
        for base_dir in dirs:
            registry.add_base_directory(entry.prefix, base_dir, prepend=entry.prepend)
    return registry


def create_autoloader(
    settings: AutoloadSettings | None = None,
    loader: Loader | None = None,
    install: bool = True,
    log_path: str | None = None,
    log_level: str | None = None,
) -> Autoloader:
    """Build an Autoloader and optionally install its import hook.

    Args:
        settings: Autoload settings (default: merged settings.yaml scopes)
        loader: Loader for NamespaceResolver.resolve (default: ModuleFileLoader)
        install: Append the import hook to sys.meta_path. Ignored when the
            separator is not ".", since the import system only passes
            dotted names.
        log_path: Write namespace_autoload logs as JSONL to this file
        log_level: Level for the JSONL log (default: NAMESPACE_AUTOLOAD_LOG_LEVEL)

    Returns:
        Autoloader owned by the caller
    """
    if log_path is not None:
        init_json_logging(log_path, log_level, logger_name=__package__)

    if settings is None:
        settings = SettingsManager().load()

    registry = build_registry(settings)
    resolver = NamespaceResolver(registry, loader=loader, extension=settings.extension)
    hook = NamespaceImportHook(resolver)
    if install and settings.separator != IMPORT_SEPARATOR:
        logger.warning(
            f"Not installing import hook: separator {settings.separator!r} never matches dotted import names"
        )
    elif install:
        hook.install()

    logger.debug(f"Autoloader ready: {len(registry)} prefixes, extension={settings.extension}")
    return Autoloader(registry=registry, resolver=resolver, hook=hook)
