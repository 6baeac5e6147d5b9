"""Tests for the property-type registry and lazy property resolution."""

import pytest
from pydantic import BaseModel

from gltfext.api import parse_document, resolve_property
from gltfext.codes import RegistrationCode
from gltfext.errors import ConversionError, RegistrationError
from gltfext.kernel.node import DocumentNode
from gltfext.kernel.schema import GltfRoot, Node, RootExtensions


class DataExtension(BaseModel):
    data: int


def test_register_and_get_property_type(properties):
    """Test declaring a shape and reading it back."""
    assert properties.register(RootExtensions, "X_prop", DataExtension) is True
    assert properties.get_property_type(RootExtensions, "X_prop") is DataExtension
    assert properties.is_registered(RootExtensions, "X_prop") is True


def test_first_declaration_wins(properties):
    """Test that re-declaring a key fails and keeps the original shape."""
    assert properties.register(RootExtensions, "X_prop", DataExtension)
    assert properties.register(RootExtensions, "X_prop", int) is False
    assert properties.get_property_type(RootExtensions, "X_prop") is DataExtension
    assert properties.try_register(RootExtensions, "X_prop", int) is RegistrationCode.DUPLICATE_KEY


@pytest.mark.parametrize("name", ["", None])
def test_invalid_names(properties, name):
    """Test that empty/None names never register or match."""
    properties.register(RootExtensions, "X_prop", DataExtension)
    assert properties.register(RootExtensions, name, int) is False
    assert properties.unregister(RootExtensions, name) is False
    assert properties.is_registered(RootExtensions, name) is False
    assert properties.get_property_type(RootExtensions, name) is None


def test_unregister(properties):
    """Test unregister on absent and present keys."""
    assert properties.unregister(Node, "X_prop") is False
    properties.register(Node, "X_prop", int)
    assert properties.unregister(Node, "X_prop") is True
    assert properties.is_registered(Node, "X_prop") is False


def test_register_or_raise(properties):
    """Test that register_or_raise reports frozen registries."""
    properties.freeze()
    with pytest.raises(RegistrationError) as exc_info:
        properties.register_or_raise(Node, "X_prop", int)
    assert exc_info.value.code is RegistrationCode.REGISTRY_FROZEN


def test_registries_are_independent(extensions, properties):
    """Test that the two registries do not share entries."""
    properties.register(RootExtensions, "X_ext", DataExtension)
    assert extensions.is_registered(RootExtensions, "X_ext") is False


def test_resolve_property_converts_raw_node(properties, minimal_document):
    """Test lazy conversion of a pass-through node via its declared shape."""
    properties.register(GltfRoot, "VENDOR_custom", DataExtension)
    document = dict(minimal_document, VENDOR_custom={"data": 5})

    result = parse_document(document, properties=properties)
    root = result.root

    # Stored raw at parse time
    assert isinstance(root.generic_properties["VENDOR_custom"], DocumentNode)
    # Converted on demand
    assert resolve_property(root, "VENDOR_custom", properties) == DataExtension(data=5)


def test_resolve_property_without_declaration_returns_node(properties, minimal_document):
    """Test that undeclared raw nodes come back unchanged."""
    document = dict(minimal_document, VENDOR_custom=[1, 2])
    root = parse_document(document).root

    value = resolve_property(root, "VENDOR_custom", properties)
    assert value == DocumentNode.from_raw([1, 2])


def test_resolve_property_returns_converted_values_unchanged(extensions, properties, minimal_document):
    """Test that values converted eagerly at parse time are not converted again."""
    extensions.register_simple(GltfRoot, "VENDOR_custom", DataExtension)
    properties.register(GltfRoot, "VENDOR_custom", int)
    document = dict(minimal_document, VENDOR_custom={"data": 5})

    root = parse_document(document, extensions=extensions, properties=properties).root
    assert resolve_property(root, "VENDOR_custom", properties) == DataExtension(data=5)


def test_resolve_property_missing_name(properties, minimal_document):
    """Test KeyError for properties that are not in the bag."""
    root = parse_document(minimal_document).root
    with pytest.raises(KeyError):
        resolve_property(root, "VENDOR_custom", properties)


def test_resolve_property_conversion_failure_propagates(properties, minimal_document):
    """Test that lazy conversion failures reach the caller."""
    properties.register(GltfRoot, "VENDOR_custom", DataExtension)
    document = dict(minimal_document, VENDOR_custom={"data": "nope"})
    root = parse_document(document, properties=properties).root

    with pytest.raises(ConversionError):
        resolve_property(root, "VENDOR_custom", properties)
