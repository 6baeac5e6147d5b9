"""Test public API surface - ensure imports work correctly and no side effects.

This test verifies:
- gltfext exposes parse_document, resolve_property and the registries
- Importing the package creates no shared registry state
- Module imports don't shadow function exports
"""

import types
from pathlib import Path


def test_api_exports_core_functions():
    """Test that gltfext.api exports parse_document and resolve_property."""
    from gltfext.api import parse_document, resolve_property

    assert isinstance(parse_document, types.FunctionType)
    assert isinstance(resolve_property, types.FunctionType)


def test_root_exports_match_all():
    """Test that every name in gltfext.__all__ is importable from the root."""
    import gltfext

    for name in gltfext.__all__:
        assert hasattr(gltfext, name), f"gltfext.{name} missing"


def test_no_global_registries():
    """Test that registries are explicit objects, not module globals."""
    from gltfext import ExtensionRegistry, PropertyTypeRegistry

    a, b = ExtensionRegistry(), ExtensionRegistry()
    a.register_simple(dict, "X_ext", int)
    assert b.is_registered(dict, "X_ext") is False
    assert len(PropertyTypeRegistry()) == 0


def test_kernel_does_not_import_api():
    """Test that kernel modules never import the high-level API module."""
    kernel_dir = Path(__file__).resolve().parent.parent / "src" / "gltfext" / "kernel"
    for path in sorted(kernel_dir.glob("*.py")):
        source = path.read_text(encoding="utf-8")
        assert "gltfext.api" not in source, f"{path.name} imports gltfext.api"
