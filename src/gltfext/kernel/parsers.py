"""Parser capabilities: the registered logic that turns a DocumentNode into a value.

The set of variants is closed:
- SimpleBinding: structural conversion into a target shape, no extra logic
- CustomParser: arbitrary conversion function supplied by the registrant
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from gltfext.errors import ConversionError
from .node import DocumentNode, adapter_for


@dataclass(frozen=True)
class SimpleBinding:
    """Convert the node directly into `shape` (see DocumentNode.convert_to)."""
    shape: Any

    def __post_init__(self):
        # Fail at registration time, not on first use, if pydantic cannot handle the shape
        adapter_for(self.shape)

    def deserialize(self, node: DocumentNode) -> Any:
        return node.convert_to(self.shape)


@dataclass(frozen=True)
class CustomParser:
    """Run a user function over the node.

    Any exception raised by the function is reported as ConversionError
    so that callers see one failure kind.
    """
    func: Callable[[DocumentNode], Any]
    label: Optional[str] = None

    def deserialize(self, node: DocumentNode) -> Any:
        try:
            return self.func(node)
        except ConversionError:
            raise
        except Exception as e:
            name = self.label or getattr(self.func, "__name__", "custom parser")
            raise ConversionError(f"{name} failed: {e}") from e


ParserCapability = Union[SimpleBinding, CustomParser]

PARSER_VARIANTS = (SimpleBinding, CustomParser)


def is_parser_capability(obj: Any) -> bool:
    """Check whether obj is one of the parser capability variants."""
    return isinstance(obj, PARSER_VARIANTS)
