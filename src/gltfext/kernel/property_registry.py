"""Property-type registry: (host kind, property name) -> declared shape.

Holds no conversion logic. Values stay as raw DocumentNodes in the
generic property bag after parsing; application code converts them on
demand with resolve_property().
"""

from typing import Any, Optional

from gltfext.codes import RegistrationCode
from .keyed_registry import KeyedRegistry
from .node import adapter_for


def _checked_shape(shape: Any) -> Any:
    adapter_for(shape)
    return shape


class PropertyTypeRegistry(KeyedRegistry[Any]):
    """Registry of declared shapes for custom properties."""

    label = "property registry"

    def try_register(self, host_kind: Any, name: str, shape: Any) -> RegistrationCode:
        return self._add(host_kind, name, lambda: _checked_shape(shape))

    def register(self, host_kind: Any, name: str, shape: Any) -> bool:
        """Declare that `name` on `host_kind` holds values of `shape`.

        Returns:
            False (and no side effect) if name is empty, the key is already
            registered or the registry is frozen; True otherwise
        """
        return self.try_register(host_kind, name, shape) is RegistrationCode.OK

    def register_or_raise(self, host_kind: Any, name: str, shape: Any) -> None:
        code = self.try_register(host_kind, name, shape)
        self._raise_unless_ok(code, host_kind, name)

    def try_unregister(self, host_kind: Any, name: str) -> RegistrationCode:
        return self._remove(host_kind, name)

    def unregister(self, host_kind: Any, name: str) -> bool:
        return self.try_unregister(host_kind, name) is RegistrationCode.OK

    def get_property_type(self, host_kind: Any, name: str) -> Optional[Any]:
        """Get the declared shape, or None if nothing is declared."""
        return self._lookup(host_kind, name)
