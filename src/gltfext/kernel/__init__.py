"""gltfext kernel: document nodes, registries and the interception hook."""

from .node import DocumentNode, MappingNode, MISSING, NodeKind, ScalarNode, SequenceNode
from .parsers import CustomParser, ParserCapability, SimpleBinding
from .extension_registry import ExtensionRegistry
from .property_registry import PropertyTypeRegistry
from .extensible import ExtensibleObject, UnrecognizedFieldSink, SINK_CONTEXT_KEY
from .interception import ExtensionInterceptor
from .context import ParsingContext

__all__ = [
    "DocumentNode",
    "MappingNode",
    "MISSING",
    "NodeKind",
    "ScalarNode",
    "SequenceNode",
    "CustomParser",
    "ParserCapability",
    "SimpleBinding",
    "ExtensionRegistry",
    "PropertyTypeRegistry",
    "ExtensibleObject",
    "UnrecognizedFieldSink",
    "SINK_CONTEXT_KEY",
    "ExtensionInterceptor",
    "ParsingContext",
]
