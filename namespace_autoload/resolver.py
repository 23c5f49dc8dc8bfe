"""Longest-prefix-first resolution of symbol names to source units.

Given ``Foo.Bar.Qux.Quux`` the resolver tries, in order::

    Foo.Bar.Qux.  + Quux
    Foo.Bar.      + Qux.Quux
    Foo.          + Bar.Qux.Quux
    .  (root)     + Foo.Bar.Qux.Quux

Within a prefix, base directories are probed in registration order. The
first existing file is loaded and the search stops.
"""

import logging
import os
from collections.abc import Iterator

from .loaders import Loader
from .loaders import ModuleFileLoader
from .mapping import DEFAULT_EXTENSION
from .mapping import map_to_relative_path
from .registry import NamespaceRegistry

logger = logging.getLogger(__name__)


class NamespaceResolver:
    """Resolve fully-qualified names against a NamespaceRegistry."""

    def __init__(
        self,
        registry: NamespaceRegistry,
        loader: Loader | None = None,
        extension: str = DEFAULT_EXTENSION,
    ):
        """Initialize resolver.

        Args:
            registry: Populated prefix registry (read only from here on)
            loader: Loader used for the first matching file
                (default: ModuleFileLoader)
            extension: Source-unit file extension, including the dot
        """
        self.registry = registry
        self.loader = loader if loader is not None else ModuleFileLoader()
        self.extension = extension

    @property
    def separator(self) -> str:
        return self.registry.separator

    def candidates(self, name: str) -> Iterator[tuple[str, str]]:
        """Yield (prefix, relative_name) pairs from most to least specific."""
        sep = self.separator
        while name.startswith(sep):
            name = name[len(sep) :]

        prefix = name
        while (pos := prefix.rfind(sep)) != -1:
            prefix = name[: pos + len(sep)]
            yield prefix, name[pos + len(sep) :]
            prefix = prefix[: -len(sep)]

        yield self.registry.root, name

    def map_path(self, relative_name: str) -> str:
        return map_to_relative_path(relative_name, self.separator, self.extension)

    def _probe(self, prefix: str, relative_name: str) -> str | None:
        """Return the first existing candidate file for the prefix."""
        dirs = self.registry.lookup(prefix)
        if not dirs:
            return None

        relative_path = self.map_path(relative_name)
        for base_dir in dirs:
            candidate = base_dir + relative_path
            if os.path.isfile(candidate):
                return candidate
            logger.debug(f"[autoload:probe] {prefix} miss {candidate}")
        return None

    def locate(self, name: str) -> str | None:
        """Find the file that would be loaded for name, without loading it."""
        for prefix, relative_name in self.candidates(name):
            if path := self._probe(prefix, relative_name):
                return path
        return None

    def locate_directory(self, name: str) -> str | None:
        """Find a directory that name maps onto, searched like locate().

        Names such as ``Foo.Bar.Qux`` in ``Foo.Bar.Qux.Quux`` map to
        directories (``qux/``) rather than source units.
        """
        for prefix, relative_name in self.candidates(name):
            relative_path = map_to_relative_path(relative_name, self.separator, "")
            for base_dir in self.registry.lookup(prefix):
                candidate = base_dir + relative_path
                if os.path.isdir(candidate):
                    return candidate
        return None

    def try_load(self, prefix: str, relative_name: str, name: str | None = None) -> str | None:
        """Load the first matching file under one prefix.

        Args:
            prefix: Namespace prefix to look up
            relative_name: Remainder of the name after the prefix
            name: Fully-qualified name handed to the loader
                (default: prefix + relative_name)

        Returns:
            Path of the loaded file, or None if no directory holds one

        Raises:
            UnitLoadError: The file exists but failed to load
        """
        path = self._probe(prefix, relative_name)
        if path is None:
            return None

        if name is None:
            name = self.registry.normalize_prefix(prefix) + relative_name
            name = name.removeprefix(self.registry.root)

        self.loader.load(path, name)
        logger.debug(f"[autoload:resolve] {name} -> {path}")
        return path

    def resolve(self, name: str) -> str | None:
        """Resolve and load the source unit defining name.

        Returns:
            Path of the loaded file, or None when no registered prefix has a
            matching file. Load failures propagate.
        """
        for prefix, relative_name in self.candidates(name):
            if path := self.try_load(prefix, relative_name, name):
                return path

        logger.debug(f"[autoload:resolve] {name} not found")
        return None

    __call__ = resolve

    def __repr__(self) -> str:
        return f"NamespaceResolver({self.registry!r}, loader={self.loader!r}, extension={self.extension!r})"
