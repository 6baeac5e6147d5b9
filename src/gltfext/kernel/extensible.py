"""Pydantic backend adapter: host entities that report unrecognized fields.

Schema entities derive from ExtensibleObject. Keys that match no declared
field are collected by pydantic as extras; after validation they are
removed from the model and handed, one by one, to the
UnrecognizedFieldSink found in the validation context. Without a sink the
extras are left where pydantic put them.
"""

from typing import Any, Dict, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationInfo, model_validator
from pydantic.alias_generators import to_camel

SINK_CONTEXT_KEY = "gltfext.sink"


@runtime_checkable
class UnrecognizedFieldSink(Protocol):
    """Callback contract between a parsing backend and the interception hook."""

    def on_unrecognized(self, host: Any, key: str, raw_value: Any) -> None:
        """Called once per key on `host` that has no statically declared field."""
        ...


class ExtensibleObject(BaseModel):
    """Base for schema entities that may carry extension or custom property data."""

    model_config = ConfigDict(extra="allow", alias_generator=to_camel)

    _generic_properties: Optional[Dict[str, Any]] = PrivateAttr(default=None)

    @property
    def generic_properties(self) -> Optional[Dict[str, Any]]:
        """Resolved values of unrecognized fields, or None if there were none."""
        return self._generic_properties

    def set_generic_property(self, name: str, value: Any) -> None:
        """Store a resolved value, allocating the property bag on first use."""
        if self._generic_properties is None:
            self._generic_properties = {}
        self._generic_properties[name] = value

    def get_generic_property(self, name: str, default: Any = None) -> Any:
        if self._generic_properties is None:
            return default
        return self._generic_properties.get(name, default)

    def __copy__(self):
        # Each entity owns its bag; a shallow copy gets its own dict
        duplicate = super().__copy__()
        if self._generic_properties is not None:
            duplicate._generic_properties = dict(self._generic_properties)
        return duplicate

    @model_validator(mode="after")
    def report_unrecognized_fields(self, info: ValidationInfo):
        sink = info.context.get(SINK_CONTEXT_KEY) if isinstance(info.context, dict) else None
        extra = self.__pydantic_extra__
        if sink is None or not extra:
            return self
        unrecognized = list(extra.items())
        extra.clear()
        for key, raw_value in unrecognized:
            sink.on_unrecognized(self, key, raw_value)
        return self
