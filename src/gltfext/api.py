"""Public API for gltfext.

High-level functions that return complete, structured results.
Applications should use these instead of driving the kernel directly.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type, Union

from gltfext.contracts import ParseReport
from gltfext.errors import DocumentError
from gltfext.settings import ParserSettings
from gltfext.kernel.context import ParsingContext
from gltfext.kernel.extensible import ExtensibleObject
from gltfext.kernel.extension_registry import ExtensionRegistry
from gltfext.kernel.node import DocumentNode
from gltfext.kernel.property_registry import PropertyTypeRegistry
from gltfext.kernel.schema import GltfRoot


@dataclass(frozen=True)
class ParseResult:
    """Parsed document root plus diagnostics."""
    root: Any
    report: ParseReport


def _reject_constant(token: str) -> Any:
    raise DocumentError(f"Invalid JSON constant: {token}")


def _load_document_data(data: Union[Dict[str, Any], str, bytes]) -> Dict[str, Any]:
    """Normalize input to a dict (pure, no I/O)."""
    if isinstance(data, dict):
        return data
    if isinstance(data, (str, bytes, bytearray)):
        try:
            payload = json.loads(data, parse_constant=_reject_constant)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DocumentError(f"Document is not valid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise DocumentError(f"Document root must be a JSON object, got {type(payload).__name__}")
        return payload
    raise TypeError(f"Expected dict, str or bytes, got {type(data).__name__}")


def parse_document(
    data: Union[Dict[str, Any], str, bytes],
    *,
    extensions: Optional[ExtensionRegistry] = None,
    properties: Optional[PropertyTypeRegistry] = None,
    settings: Optional[ParserSettings] = None,
    root_type: Type[ExtensibleObject] = GltfRoot,
    context: Optional[ParsingContext] = None,
) -> ParseResult:
    """
    Parse a document, resolving unrecognized fields through the extension registry.

    Args:
        data: Document as dict, JSON text or JSON bytes
        extensions: Extension registry (ignored when context is given)
        properties: Property-type registry (ignored when context is given)
        settings: Parser settings (ignored when context is given)
        root_type: Schema type of the document root
        context: Existing parsing context to reuse

    Returns:
        ParseResult with the validated root and a ParseReport

    Raises:
        DocumentError: If data is not a JSON object or fails core schema validation
        ConversionError: If settings.conversion_errors == "raise" and an extension fails
        UnknownExtensionError: If settings.unknown_extensions == "reject" and an
                               unregistered field is present
    """
    payload = _load_document_data(data)
    if context is None:
        context = ParsingContext(extensions=extensions, properties=properties, settings=settings)
    root, report = context.parse(payload, root_type)
    return ParseResult(root=root, report=report)


def resolve_property(host: ExtensibleObject, name: str, properties: PropertyTypeRegistry) -> Any:
    """
    Read a generic property, converting a raw node through its declared shape.

    Values already converted at parse time are returned unchanged, as are
    raw nodes with no declared shape.

    Raises:
        KeyError: If the host has no generic property `name`
        ConversionError: If the raw node does not match the declared shape
    """
    bag = host.generic_properties
    if bag is None or name not in bag:
        raise KeyError(name)
    value = bag[name]
    if not isinstance(value, DocumentNode):
        return value
    shape = properties.get_property_type(type(host), name)
    if shape is None:
        return value
    return value.convert_to(shape)
