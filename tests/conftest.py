"""Pytest configuration for namespace_autoload tests."""

import sys
from pathlib import Path

import pytest

from namespace_autoload import NamespaceRegistry


@pytest.fixture(autouse=True)
def isolate_import_state():
    """Restore sys.modules and sys.meta_path after each test."""
    modules = set(sys.modules)
    meta_path = list(sys.meta_path)
    yield
    for name in set(sys.modules) - modules:
        del sys.modules[name]
    sys.meta_path[:] = meta_path


@pytest.fixture
def write_unit(tmp_path: Path):
    """Write a source unit under tmp_path and return its path."""

    def _write(relative: str, body: str = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body)
        return path

    return _write


@pytest.fixture
def registry() -> NamespaceRegistry:
    return NamespaceRegistry()
