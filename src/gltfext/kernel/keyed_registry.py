"""Shared storage for registries keyed by (host kind, name).

Mutations are serialized by a lock and publish a new dict each time
(copy-on-write), so lookups need no lock and always see a complete
snapshot. A frozen registry rejects every mutation until clear().
"""

import logging
import threading
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from gltfext.codes import RegistrationCode
from gltfext.errors import RegistrationError

logger = logging.getLogger(__name__)

V = TypeVar("V")

RegistryKey = Tuple[Any, str]


def is_valid_name(name: Any) -> bool:
    """Extension and property names must be non-empty strings."""
    return isinstance(name, str) and name != ""


def host_kind_name(host_kind: Any) -> str:
    """Readable name for a host kind (used in logs, issues and sorting)."""
    return getattr(host_kind, "__qualname__", None) or repr(host_kind)


class KeyedRegistry(Generic[V]):
    """Base registry: at most one value per (host_kind, name), first writer wins."""

    label = "registry"

    def __init__(self) -> None:
        self._entries: Dict[RegistryKey, V] = {}
        self._lock = threading.Lock()
        self._frozen = False

    def _add(self, host_kind: Any, name: Any, make_value: Callable[[], V]) -> RegistrationCode:
        if not is_valid_name(name):
            return RegistrationCode.INVALID_NAME
        key = (host_kind, name)
        with self._lock:
            if self._frozen:
                code = RegistrationCode.REGISTRY_FROZEN
            elif key in self._entries:
                code = RegistrationCode.DUPLICATE_KEY
            else:
                entries = dict(self._entries)
                entries[key] = make_value()
                self._entries = entries
                code = RegistrationCode.OK
        logger.debug("%s register %s/%s: %s", self.label, host_kind_name(host_kind), name, code.value)
        return code

    def _remove(self, host_kind: Any, name: Any) -> RegistrationCode:
        if not is_valid_name(name):
            return RegistrationCode.INVALID_NAME
        key = (host_kind, name)
        with self._lock:
            if self._frozen:
                code = RegistrationCode.REGISTRY_FROZEN
            elif key not in self._entries:
                code = RegistrationCode.NOT_REGISTERED
            else:
                entries = dict(self._entries)
                del entries[key]
                self._entries = entries
                code = RegistrationCode.OK
        logger.debug("%s unregister %s/%s: %s", self.label, host_kind_name(host_kind), name, code.value)
        return code

    def _lookup(self, host_kind: Any, name: Any) -> Optional[V]:
        if not is_valid_name(name):
            return None
        return self._entries.get((host_kind, name))

    def _raise_unless_ok(self, code: RegistrationCode, host_kind: Any, name: Any) -> None:
        if code is not RegistrationCode.OK:
            raise RegistrationError(
                f"Cannot register '{name}' on {host_kind_name(host_kind)} in {self.label}: {code.value}",
                code,
            )

    def is_registered(self, host_kind: Any, name: Any) -> bool:
        """Check whether (host_kind, name) has a registration."""
        return is_valid_name(name) and (host_kind, name) in self._entries

    def keys(self) -> List[RegistryKey]:
        """All registered keys, sorted by host kind name then name."""
        return sorted(self._entries, key=lambda k: (host_kind_name(k[0]), k[1]))

    def __contains__(self, key: Any) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        return self.is_registered(key[0], key[1])

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the registry read-only. Lookups keep working."""
        with self._lock:
            self._frozen = True
        logger.debug("%s frozen with %d entries", self.label, len(self._entries))

    def clear(self) -> None:
        """Teardown: drop every entry and unfreeze."""
        with self._lock:
            self._entries = {}
            self._frozen = False
