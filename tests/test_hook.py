"""Tests for NamespaceImportHook integration with the import system."""

import importlib
import sys

import pytest

from namespace_autoload import NamespaceImportHook
from namespace_autoload import NamespaceResolver


@pytest.fixture
def hook(registry):
    return NamespaceImportHook(NamespaceResolver(registry))


class TestFindSpec:
    def test_namespace_package_for_registered_prefix(self, registry, hook, tmp_path):
        registry.add_base_directory("Acme.Tools", tmp_path)

        for name in ("Acme", "Acme.Tools"):
            spec = hook.find_spec(name)
            assert spec is not None
            assert spec.loader is None
            assert spec.submodule_search_locations == []

    def test_file_spec_for_located_unit(self, registry, hook, write_unit, tmp_path):
        unit = write_unit("src/hammer.py")
        registry.add_base_directory("Acme.Tools", tmp_path / "src")

        spec = hook.find_spec("Acme.Tools.Hammer")

        assert spec.origin == str(unit)
        assert spec.loader is not None

    def test_namespace_package_for_mapped_directory(self, registry, hook, write_unit, tmp_path):
        write_unit("src/qux/quux.py")
        registry.add_base_directory("Acme.Tools", tmp_path / "src")

        spec = hook.find_spec("Acme.Tools.Qux")

        assert spec is not None
        assert spec.loader is None
        assert spec.submodule_search_locations == []

    def test_unknown_name_defers(self, registry, hook, tmp_path):
        registry.add_base_directory("Acme.Tools", tmp_path)
        assert hook.find_spec("Elsewhere.Thing") is None
        assert hook.find_spec("Acme.Tools.Missing") is None


class TestInstall:
    def test_install_is_idempotent(self, hook):
        hook.install()
        hook.install()
        assert sys.meta_path.count(hook) == 1
        assert sys.meta_path[-1] is hook

    def test_prepend(self, hook):
        hook.install(prepend=True)
        assert sys.meta_path[0] is hook

    def test_uninstall(self, hook):
        hook.install()
        hook.uninstall()
        assert not hook.installed
        hook.uninstall()


class TestImportStatement:
    def test_import_from_registered_directory(self, registry, hook, write_unit, tmp_path):
        write_unit("src/qux/quux.py", "NAME = 'quux'\n")
        registry.add_base_directory("Widgets.Core", tmp_path / "src")
        hook.install()

        module = importlib.import_module("Widgets.Core.Qux.Quux")

        assert module.NAME == "quux"
        assert importlib.import_module("Widgets.Core.Qux.Quux") is module

    def test_import_two_directories_deep(self, registry, hook, write_unit, tmp_path):
        write_unit("src/deep/er/leaf-unit.py", "DEPTH = 2\n")
        registry.add_base_directory("Widgets.Core", tmp_path / "src")
        hook.install()

        module = importlib.import_module("Widgets.Core.Deep.Er.Leaf_Unit")

        assert module.DEPTH == 2
        assert "Widgets.Core.Deep.Er" in sys.modules

    def test_missing_unit_raises_module_not_found(self, registry, hook, tmp_path):
        registry.add_base_directory("Widgets.Core", tmp_path / "src")
        hook.install()

        with pytest.raises(ModuleNotFoundError):
            importlib.import_module("Widgets.Core.Nothing")

    def test_broken_unit_raises(self, registry, hook, write_unit, tmp_path):
        write_unit("src/broken.py", "raise RuntimeError('broken unit')\n")
        registry.add_base_directory("Widgets.Core", tmp_path / "src")
        hook.install()

        with pytest.raises(RuntimeError, match="broken unit"):
            importlib.import_module("Widgets.Core.Broken")
        assert "Widgets.Core.Broken" not in sys.modules
