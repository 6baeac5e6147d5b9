"""gltfext: extension-aware parsing for schema-extensible glTF documents."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gltfext")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from gltfext.api import parse_document, resolve_property, ParseResult
from gltfext.contracts import ExtensionIssue, ParseReport
from gltfext.codes import IssueCode, RegistrationCode
from gltfext.errors import (
    ConversionError,
    DocumentError,
    GltfExtError,
    RegistrationError,
    UnknownExtensionError,
)
from gltfext.settings import ParserSettings
from gltfext.kernel import (
    CustomParser,
    DocumentNode,
    ExtensibleObject,
    ExtensionRegistry,
    MISSING,
    ParsingContext,
    PropertyTypeRegistry,
    SimpleBinding,
)

__all__ = [
    "__version__",
    "parse_document",
    "resolve_property",
    "ParseResult",
    "ExtensionIssue",
    "ParseReport",
    "IssueCode",
    "RegistrationCode",
    "ConversionError",
    "DocumentError",
    "GltfExtError",
    "RegistrationError",
    "UnknownExtensionError",
    "ParserSettings",
    "CustomParser",
    "DocumentNode",
    "ExtensibleObject",
    "ExtensionRegistry",
    "MISSING",
    "ParsingContext",
    "PropertyTypeRegistry",
    "SimpleBinding",
]
