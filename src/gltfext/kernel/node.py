"""Document nodes: immutable, backend-independent views over parsed JSON.

A node is one of:
- ScalarNode: null, bool, int, float or string
- SequenceNode: ordered tuple of child nodes
- MappingNode: read-only mapping of string keys to child nodes
- MISSING: sentinel returned for absent keys and out-of-range indexes

Indexing is total: ``node["a"]["b"]`` never raises, it yields MISSING
somewhere along the chain instead. Only reading the content of MISSING
(value, to_python, convert_to) fails.
"""

import json
import math
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Tuple

from pydantic import TypeAdapter, ValidationError

from gltfext._internal.canonical_json import canonical_dumps
from gltfext.errors import ConversionError


class NodeKind(str, Enum):
    """Structural kind of a document node."""
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    MISSING = "missing"


@lru_cache(maxsize=256)
def _cached_adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def adapter_for(shape: Any) -> TypeAdapter:
    """Get a (cached) pydantic TypeAdapter for a target shape.

    Raises pydantic's schema generation error if the shape is not
    something pydantic can validate into.
    """
    try:
        return _cached_adapter(shape)
    except TypeError:
        # Unhashable shape (e.g. Annotated with unhashable metadata)
        return TypeAdapter(shape)


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or repr(shape)


class DocumentNode:
    """Base class for document nodes. Use DocumentNode.from_raw() to build one."""

    __slots__ = ()

    kind: NodeKind

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @staticmethod
    def from_raw(value: Any) -> "DocumentNode":
        """Build a node snapshot from JSON-compatible Python data.

        The input is copied recursively; the node keeps no reference to
        mutable containers of the caller.

        Args:
            value: None, bool, int, float, str, list/tuple or dict with str keys

        Returns:
            DocumentNode for the value

        Raises:
            TypeError: If the value (or a nested value) is not JSON-compatible
            ValueError: If a float is NaN or infinite
        """
        if isinstance(value, DocumentNode):
            return value
        if value is None or isinstance(value, (bool, int, str)):
            return ScalarNode(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError(f"Non-finite number is not valid JSON: {value!r}")
            return ScalarNode(value)
        if isinstance(value, Mapping):
            entries = {}
            for key, child in value.items():
                if not isinstance(key, str):
                    raise TypeError(f"Mapping keys must be strings, got {type(key).__name__}")
                entries[key] = DocumentNode.from_raw(child)
            return MappingNode(entries)
        if isinstance(value, (list, tuple)):
            return SequenceNode(tuple(DocumentNode.from_raw(item) for item in value))
        raise TypeError(f"Unsupported type for document node: {type(value).__name__}")

    @property
    def is_missing(self) -> bool:
        return False

    @property
    def value(self) -> Any:
        """Scalar content. Only ScalarNode has one."""
        raise ConversionError(f"A {self.kind.value} node has no scalar value")

    def to_python(self) -> Any:
        """Return a fresh plain-Python copy of the node content."""
        raise NotImplementedError

    def __getitem__(self, key: Any) -> "DocumentNode":
        return MISSING

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the child node for key, or default if it is missing."""
        child = self[key]
        return default if child.is_missing else child

    def convert_to(self, shape: Any) -> Any:
        """Convert the node content into the requested shape.

        Matching is structural (field by field for models and dataclasses,
        element-wise for containers) and strict: a string is never parsed
        into a number, a number is never turned into a string.

        Args:
            shape: Any type pydantic can validate (int, list[int], BaseModel
                subclass, dataclass, TypedDict, ...)

        Returns:
            Instance of the requested shape

        Raises:
            ConversionError: If the content does not match the shape
        """
        text = json.dumps(self.to_python(), separators=(",", ":"), ensure_ascii=False)
        adapter = adapter_for(shape)
        try:
            return adapter.validate_json(text, strict=True)
        except ValidationError as e:
            raise ConversionError(
                f"Cannot convert {self.kind.value} node to {_shape_name(shape)}: "
                f"{e.error_count()} validation error(s)",
                errors=e.errors(include_url=False),
            ) from e

    def __len__(self) -> int:
        return 0

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __bool__(self) -> bool:
        return True

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DocumentNode):
            return NotImplemented
        return self.kind is other.kind and self._content_key() == other._content_key()

    __hash__ = None

    def _content_key(self) -> Any:
        raise NotImplementedError

    def __copy__(self) -> "DocumentNode":
        return self

    def __deepcopy__(self, memo) -> "DocumentNode":
        return self

    def __str__(self) -> str:
        return canonical_dumps(self.to_python())


class ScalarNode(DocumentNode):
    """A JSON scalar: null, bool, number or string."""

    __slots__ = ("_value",)

    kind = NodeKind.SCALAR

    def __init__(self, value: Any):
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> Any:
        return self._value

    def to_python(self) -> Any:
        return self._value

    def _content_key(self) -> Any:
        # bool is an int subclass; keep True distinct from 1
        return (type(self._value).__name__, self._value)

    def __repr__(self) -> str:
        return f"ScalarNode({self._value!r})"


class SequenceNode(DocumentNode):
    """An ordered JSON array of child nodes."""

    __slots__ = ("_items",)

    kind = NodeKind.SEQUENCE

    def __init__(self, items: Tuple[DocumentNode, ...]):
        object.__setattr__(self, "_items", tuple(items))

    def to_python(self) -> Any:
        return [item.to_python() for item in self._items]

    def __getitem__(self, key: Any) -> DocumentNode:
        if isinstance(key, int) and not isinstance(key, bool):
            try:
                return self._items[key]
            except IndexError:
                return MISSING
        return MISSING

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[DocumentNode]:
        return iter(self._items)

    def _content_key(self) -> Any:
        return tuple(item._content_key() for item in self._items)

    def __repr__(self) -> str:
        return f"SequenceNode({list(self._items)!r})"


class MappingNode(DocumentNode):
    """A JSON object: string keys bound to child nodes, in document order."""

    __slots__ = ("_entries",)

    kind = NodeKind.MAPPING

    def __init__(self, entries: Mapping[str, DocumentNode]):
        object.__setattr__(self, "_entries", MappingProxyType(dict(entries)))

    def to_python(self) -> Any:
        return {key: child.to_python() for key, child in self._entries.items()}

    def __getitem__(self, key: Any) -> DocumentNode:
        if isinstance(key, str):
            return self._entries.get(key, MISSING)
        return MISSING

    def __contains__(self, key: Any) -> bool:
        return key in self._entries

    def keys(self):
        return self._entries.keys()

    def items(self):
        return self._entries.items()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def _content_key(self) -> Any:
        return tuple(sorted((key, child._content_key()) for key, child in self._entries.items()))

    def __repr__(self) -> str:
        return f"MappingNode({dict(self._entries)!r})"


class _MissingNode(DocumentNode):
    """Sentinel for an absent key or index. Falsy; indexing it yields itself."""

    __slots__ = ()

    kind = NodeKind.MISSING

    @property
    def is_missing(self) -> bool:
        return True

    @property
    def value(self) -> Any:
        raise ConversionError("Cannot read the value of a missing node")

    def to_python(self) -> Any:
        raise ConversionError("Cannot read content of a missing node")

    def convert_to(self, shape: Any) -> Any:
        raise ConversionError(f"Cannot convert a missing node to {_shape_name(shape)}")

    def __bool__(self) -> bool:
        return False

    def _content_key(self) -> Any:
        return None

    def __str__(self) -> str:
        return "<missing>"

    def __repr__(self) -> str:
        return "MISSING"


MISSING: DocumentNode = _MissingNode()
