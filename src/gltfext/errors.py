"""Exception hierarchy for gltfext.

All errors derive from GltfExtError rather than ValueError so that they
pass through pydantic validators without being folded into a
ValidationError.
"""

from typing import Any, List, Optional


class GltfExtError(Exception):
    """Base class for gltfext errors."""
    pass


class ConversionError(GltfExtError):
    """Raised when a document node cannot be converted into the requested shape."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []


class RegistrationError(GltfExtError):
    """Raised by register_or_raise() when a registration does not stick."""

    def __init__(self, message: str, code):
        super().__init__(message)
        self.code = code


class UnknownExtensionError(GltfExtError):
    """Raised in reject mode when a document carries an unregistered extension."""

    def __init__(self, host_kind: str, name: str):
        super().__init__(f"No parser registered for '{name}' on {host_kind}")
        self.host_kind = host_kind
        self.name = name


class DocumentError(GltfExtError):
    """Raised when the core document is not JSON or fails schema validation."""
    pass
