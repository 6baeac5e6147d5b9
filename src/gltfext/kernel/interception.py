"""Interception hook: resolve unrecognized fields through the extension registry."""

import logging
from typing import Any, List, Optional, Set, Tuple

from gltfext.codes import IssueCode
from gltfext.contracts import ExtensionIssue, ParseReport
from gltfext.errors import ConversionError, DocumentError, UnknownExtensionError
from gltfext.settings import ParserSettings
from .extension_registry import ExtensionRegistry
from .keyed_registry import host_kind_name
from .node import DocumentNode

logger = logging.getLogger(__name__)


class ExtensionInterceptor:
    """UnrecognizedFieldSink that stores resolved values on the host entity.

    For each (host, key, raw value):
    1. host kind is the exact runtime class of the host
    2. the extension registry is queried for (host kind, key)
    3. the raw value is snapshotted into a DocumentNode
    4. a registered parser converts the node; otherwise the node itself is the value
    5. the value is stored in the host's generic property bag under key

    The property-type registry is never consulted here.
    """

    def __init__(self, extensions: ExtensionRegistry, settings: Optional[ParserSettings] = None):
        self.extensions = extensions
        self.settings = settings or ParserSettings()
        self.issues: List[ExtensionIssue] = []
        self.unregistered: Set[Tuple[str, str]] = set()

    def on_unrecognized(self, host: Any, key: str, raw_value: Any) -> None:
        host_kind = type(host)
        parser = self.extensions.get_parser(host_kind, key)
        try:
            node = DocumentNode.from_raw(raw_value)
        except (TypeError, ValueError) as e:
            raise DocumentError(f"{host_kind_name(host_kind)}/{key} is not valid JSON data: {e}") from e

        if parser is None:
            self._note_unregistered(host_kind, key)
            value = node
        else:
            value = self._deserialize(parser, host_kind, key, node)

        host.set_generic_property(key, value)

    def _note_unregistered(self, host_kind: type, key: str) -> None:
        kind_name = host_kind_name(host_kind)
        if self.settings.unknown_extensions == "reject":
            raise UnknownExtensionError(kind_name, key)
        logger.debug("No parser for %s/%s, storing raw node", kind_name, key)
        self.unregistered.add((kind_name, key))

    def _deserialize(self, parser, host_kind: type, key: str, node: DocumentNode) -> Any:
        try:
            return parser.deserialize(node)
        except ConversionError as e:
            if self.settings.conversion_errors == "raise":
                raise
            kind_name = host_kind_name(host_kind)
            logger.warning("Could not convert %s/%s, storing raw node: %s", kind_name, key, e)
            self.issues.append(ExtensionIssue(
                host_kind=kind_name,
                name=key,
                code=IssueCode.CONVERSION_FAILED,
                message=str(e),
            ))
            return node

    def build_report(self) -> ParseReport:
        """Summarize issues and pass-through keys seen so far."""
        issues = sorted(self.issues, key=lambda i: (i.host_kind, i.name))
        unregistered = [f"{kind}/{name}" for kind, name in sorted(self.unregistered)]
        warnings = []
        if unregistered:
            warnings.append(
                f"{IssueCode.UNREGISTERED_EXTENSION.value}: {len(unregistered)} field(s) stored as raw nodes"
            )
        return ParseReport(
            ok=not issues,
            issues=issues,
            unregistered=unregistered,
            warnings=warnings,
        )
