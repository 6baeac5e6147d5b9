"""Extension registry: (host kind, extension name) -> parser capability.

Example:
    class MyRootExtension(BaseModel):
        data: int

    extensions = ExtensionRegistry()
    extensions.register_simple(RootExtensions, "VENDOR_my_extension", MyRootExtension)

    # {"extensions": {"VENDOR_my_extension": {"data": 1}}} parses to
    # root.extensions.generic_properties["VENDOR_my_extension"] == MyRootExtension(data=1)
"""

from typing import Any, Callable, Optional

from gltfext.codes import RegistrationCode
from .keyed_registry import KeyedRegistry
from .node import DocumentNode
from .parsers import CustomParser, ParserCapability, SimpleBinding, is_parser_capability


def _build_parser(parser_factory: Callable[[], ParserCapability]) -> ParserCapability:
    parser = parser_factory()
    if not is_parser_capability(parser):
        raise TypeError(
            f"Parser factory must return SimpleBinding or CustomParser, got {type(parser).__name__}"
        )
    return parser


class ExtensionRegistry(KeyedRegistry[ParserCapability]):
    """Registry of parser capabilities for extensions.

    The factory is called once, at registration; the resulting parser is
    reused for every occurrence of the extension.
    """

    label = "extension registry"

    def try_register(
        self,
        host_kind: Any,
        name: str,
        parser_factory: Callable[[], ParserCapability],
    ) -> RegistrationCode:
        """Register a parser, returning a code that tells why it did not stick."""
        return self._add(host_kind, name, lambda: _build_parser(parser_factory))

    def register(
        self,
        host_kind: Any,
        name: str,
        parser_factory: Callable[[], ParserCapability],
    ) -> bool:
        """Register a parser for (host_kind, name).

        Returns:
            False (and no side effect) if name is empty, the key is already
            registered or the registry is frozen; True otherwise
        """
        return self.try_register(host_kind, name, parser_factory) is RegistrationCode.OK

    def register_simple(self, host_kind: Any, name: str, shape: Any) -> bool:
        """Register a SimpleBinding that converts the extension into `shape`."""
        return self.register(host_kind, name, lambda: SimpleBinding(shape))

    def register_custom(self, host_kind: Any, name: str, func: Callable[[DocumentNode], Any]) -> bool:
        """Register a CustomParser running `func` over the extension node."""
        return self.register(host_kind, name, lambda: CustomParser(func))

    def register_or_raise(
        self,
        host_kind: Any,
        name: str,
        parser_factory: Callable[[], ParserCapability],
    ) -> None:
        """Like register(), but raises RegistrationError with the failure code."""
        code = self.try_register(host_kind, name, parser_factory)
        self._raise_unless_ok(code, host_kind, name)

    def try_unregister(self, host_kind: Any, name: str) -> RegistrationCode:
        return self._remove(host_kind, name)

    def unregister(self, host_kind: Any, name: str) -> bool:
        """Remove a registration. False if name is empty, absent, or registry frozen."""
        return self.try_unregister(host_kind, name) is RegistrationCode.OK

    def get_parser(self, host_kind: Any, name: str) -> Optional[ParserCapability]:
        """Get the registered parser, or None. Absence is not an error."""
        return self._lookup(host_kind, name)
