"""Parsing context: the registries and settings a parse runs against."""

import logging
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from gltfext.contracts import ParseReport
from gltfext.errors import DocumentError
from gltfext.settings import ParserSettings
from .extensible import SINK_CONTEXT_KEY
from .extension_registry import ExtensionRegistry
from .interception import ExtensionInterceptor
from .property_registry import PropertyTypeRegistry

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ParsingContext:
    """Owns both registries for the lifetime of an application.

    Populate the registries during setup, then call parse(). With
    settings.freeze_registries (the default) the first parse freezes both
    registries, so registration after parsing has begun fails instead of
    racing with in-flight lookups.
    """

    def __init__(
        self,
        extensions: Optional[ExtensionRegistry] = None,
        properties: Optional[PropertyTypeRegistry] = None,
        settings: Optional[ParserSettings] = None,
    ):
        self.extensions = extensions if extensions is not None else ExtensionRegistry()
        self.properties = properties if properties is not None else PropertyTypeRegistry()
        self.settings = settings or ParserSettings()

    def parse(self, data: Dict[str, Any], root_type: Type[M]) -> Tuple[M, ParseReport]:
        """Validate `data` into `root_type`, routing unrecognized fields through the hook.

        Raises:
            DocumentError: If the core structure does not match root_type
            ConversionError: With conversion_errors="raise" only
            UnknownExtensionError: With unknown_extensions="reject" only
        """
        if self.settings.freeze_registries:
            self.extensions.freeze()
            self.properties.freeze()

        interceptor = ExtensionInterceptor(self.extensions, self.settings)
        try:
            root = root_type.model_validate(data, context={SINK_CONTEXT_KEY: interceptor})
        except ValidationError as e:
            raise DocumentError(f"Invalid {root_type.__name__} structure: {e}") from e

        report = interceptor.build_report()
        logger.debug(
            "Parsed %s: %d issue(s), %d raw field(s)",
            root_type.__name__, len(report.issues), len(report.unregistered),
        )
        return root, report

    def close(self) -> None:
        """Teardown: clear and unfreeze both registries."""
        self.extensions.clear()
        self.properties.clear()

    def __enter__(self) -> "ParsingContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
