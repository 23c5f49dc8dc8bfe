"""Namespace prefix registry.

Holds, for each normalized namespace prefix, the ordered base directories
that may contain source units for names under that prefix. The registry is
filled at startup and only read during resolution.
"""

import logging
import os

from .errors import RegistrationError
from .mapping import DEFAULT_SEPARATOR

logger = logging.getLogger(__name__)


def _strip_separator(value: str, separator: str) -> str:
    while value.startswith(separator):
        value = value[len(separator) :]
    while value.endswith(separator):
        value = value[: -len(separator)]
    return value


class NamespaceRegistry:
    """Ordered base directories keyed by namespace prefix."""

    def __init__(self, separator: str = DEFAULT_SEPARATOR):
        """Initialize an empty registry.

        Args:
            separator: Namespace separator used in symbol names (e.g. ".")
        """
        if not separator:
            raise RegistrationError("Namespace separator must not be empty")
        self.separator = separator
        self._prefixes: dict[str, list[str]] = {}

    @property
    def root(self) -> str:
        """Normalized key of the global namespace."""
        return self.separator

    def normalize_prefix(self, prefix: str) -> str:
        """Strip surrounding separators and append exactly one."""
        return _strip_separator(prefix, self.separator) + self.separator

    @staticmethod
    def normalize_base_dir(base_dir: str | os.PathLike) -> str:
        """Return the directory with exactly one trailing path separator."""
        return os.fspath(base_dir).rstrip(os.sep) + os.sep

    def add_base_directory(self, prefix: str, base_dir: str | os.PathLike, prepend: bool = False) -> None:
        """Add a base directory for a namespace prefix.

        Re-registering the same pair adds a second entry; callers are
        expected to avoid duplicate registration themselves.

        Args:
            prefix: Namespace prefix (e.g. "Foo.Bar"). A prefix made only of
                separators registers the root namespace.
            base_dir: Directory holding source units for the prefix
            prepend: Search this directory first instead of last

        Raises:
            RegistrationError: Empty prefix or base directory
        """
        if not prefix:
            raise RegistrationError("Namespace prefix must not be empty (use the separator for the root namespace)")
        if not os.fspath(base_dir):
            raise RegistrationError(f"Base directory for namespace '{prefix}' must not be empty")

        key = self.normalize_prefix(prefix)
        directory = self.normalize_base_dir(base_dir)
        dirs = self._prefixes.setdefault(key, [])

        if prepend:
            dirs.insert(0, directory)
        else:
            dirs.append(directory)

        logger.debug(f"[autoload:register] {key} -> {directory} ({'prepend' if prepend else 'append'})")

    def lookup(self, prefix: str) -> list[str]:
        """Return the base directories registered for an exact prefix.

        The prefix is normalized first; no partial matching is done here.

        Returns:
            Copy of the ordered directory list, empty if unregistered
        """
        return list(self._prefixes.get(self.normalize_prefix(prefix), ()))

    def covers(self, name: str) -> bool:
        """Check whether name is a registered prefix or an ancestor of one."""
        key = self.normalize_prefix(name)
        if key == self.root:
            return False
        return any(registered.startswith(key) for registered in self._prefixes)

    def prefixes(self) -> list[str]:
        """Registered prefixes in registration order."""
        return list(self._prefixes)

    def __contains__(self, prefix: str) -> bool:
        return self.normalize_prefix(prefix) in self._prefixes

    def __len__(self) -> int:
        return len(self._prefixes)

    def __repr__(self) -> str:
        return f"NamespaceRegistry({len(self._prefixes)} prefixes, separator={self.separator!r})"
