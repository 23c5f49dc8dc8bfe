"""Loaders that execute a located source unit.

The resolver only decides *which* file defines a name; a loader decides how
that file's top-level code is run.
"""

import importlib.machinery
import importlib.util
import logging
import sys
from types import ModuleType
from typing import Any
from typing import Protocol

from .errors import UnitLoadError

logger = logging.getLogger(__name__)


class Loader(Protocol):
    """Capability to load a source unit found on disk."""

    def load(self, path: str, name: str) -> Any:
        """Load the unit at path as name.

        Returns:
            Handle for the loaded unit

        Raises:
            UnitLoadError: The unit exists but could not be loaded
        """
        ...


class ModuleFileLoader:
    """Execute a source file as a Python module registered in sys.modules."""

    def load(self, path: str, name: str) -> ModuleType:
        source_loader = importlib.machinery.SourceFileLoader(name, path)
        spec = importlib.util.spec_from_file_location(name, path, loader=source_loader)
        if spec is None:
            raise UnitLoadError(f"Cannot build a module spec for {path}", name=name, path=path)

        module = importlib.util.module_from_spec(spec)
        previous = sys.modules.get(name)
        # Registered before execution so the unit can import itself
        sys.modules[name] = module
        try:
            source_loader.exec_module(module)
        except Exception as e:
            if previous is None:
                sys.modules.pop(name, None)
            else:
                sys.modules[name] = previous
            raise UnitLoadError(f"Failed to load '{name}' from {path}: {e}", name=name, path=path) from e

        logger.debug(f"[autoload:load] {name} <- {path}")
        return module

    def __repr__(self) -> str:
        return "ModuleFileLoader()"
