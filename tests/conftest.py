"""Pytest configuration and shared fixtures.

No sys.path hacks - tests import from the installed gltfext package.
"""

import pytest

from gltfext.kernel.extension_registry import ExtensionRegistry
from gltfext.kernel.property_registry import PropertyTypeRegistry


@pytest.fixture
def extensions():
    """Fresh, empty extension registry per test."""
    return ExtensionRegistry()


@pytest.fixture
def properties():
    """Fresh, empty property-type registry per test."""
    return PropertyTypeRegistry()


@pytest.fixture
def minimal_document():
    """Smallest valid document: just an asset."""
    return {
        "asset": {
            "version": "2.0",
            "generator": "gltfext tests",
        }
    }


@pytest.fixture
def extended_document():
    """Document with extensions on the root, a node and a material."""
    return {
        "asset": {"version": "2.0"},
        "extensionsUsed": ["X_ext", "Y_ext", "VENDOR_lod"],
        "nodes": [
            {
                "name": "root",
                "children": [1],
                "extensions": {"VENDOR_lod": {"levels": [1, 2, 3]}},
            },
            {"name": "child", "mesh": 0},
        ],
        "materials": [
            {
                "name": "paint",
                "extensions": {"X_ext": {"data": 7}},
            }
        ],
        "extensions": {
            "X_ext": {"data": 1},
            "Y_ext": {"data": 2},
        },
    }
