"""Public result models for gltfext parsing."""

from typing import List
from pydantic import BaseModel, Field

from gltfext.codes import IssueCode


class ExtensionIssue(BaseModel):
    """A problem found while resolving one unrecognized field."""
    host_kind: str  # Qualified class name of the host entity, e.g. "NodeExtensions"
    name: str  # Extension or property name
    code: IssueCode
    message: str


class ParseReport(BaseModel):
    """Diagnostics for one document parse."""
    ok: bool  # True if every registered extension converted
    issues: List[ExtensionIssue] = Field(default_factory=list)  # sorted by (host_kind, name)
    unregistered: List[str] = Field(default_factory=list)  # sorted "HostKind/name" entries passed through raw
    warnings: List[str] = Field(default_factory=list)
