"""Import-system integration for the namespace resolver.

Installing a NamespaceImportHook on ``sys.meta_path`` lets plain ``import``
statements reach source units in registered base directories. The import
system keeps its own "already loaded" bookkeeping in ``sys.modules``, so each
unit is executed once per process.
"""

import importlib.abc
import importlib.machinery
import importlib.util
import logging
import sys

from .resolver import NamespaceResolver

logger = logging.getLogger(__name__)


class NamespaceImportHook(importlib.abc.MetaPathFinder):
    """Meta path finder backed by a NamespaceResolver."""

    def __init__(self, resolver: NamespaceResolver):
        self.resolver = resolver

    def find_spec(self, fullname, path=None, target=None):
        """Return a module spec for fullname, or None to defer to other finders.

        Registered prefixes and their ancestors become namespace packages so
        that their children can be imported. Any other name is looked up with
        the resolver's longest-prefix-first search, first as a source unit and
        then as a directory, which also becomes a namespace package.
        """
        if self.resolver.registry.covers(fullname):
            logger.debug(f"[autoload:hook] {fullname} -> namespace package")
            return importlib.machinery.ModuleSpec(fullname, None, is_package=True)

        located = self.resolver.locate(fullname)
        if located is not None:
            logger.debug(f"[autoload:hook] {fullname} -> {located}")
            loader = importlib.machinery.SourceFileLoader(fullname, located)
            return importlib.util.spec_from_file_location(fullname, located, loader=loader)

        if directory := self.resolver.locate_directory(fullname):
            logger.debug(f"[autoload:hook] {fullname} -> namespace package at {directory}")
            return importlib.machinery.ModuleSpec(fullname, None, is_package=True)

        return None

    @property
    def installed(self) -> bool:
        return self in sys.meta_path

    def install(self, prepend: bool = False) -> None:
        """Add the hook to sys.meta_path (no-op if already present).

        Args:
            prepend: Consult this hook before the standard finders
        """
        if self.installed:
            return
        if prepend:
            sys.meta_path.insert(0, self)
        else:
            sys.meta_path.append(self)
        logger.debug(f"[autoload:hook] installed ({'first' if prepend else 'last'})")

    def uninstall(self) -> None:
        """Remove the hook from sys.meta_path if present."""
        if self.installed:
            sys.meta_path.remove(self)
            logger.debug("[autoload:hook] uninstalled")

    def __repr__(self) -> str:
        return f"NamespaceImportHook({self.resolver!r})"
