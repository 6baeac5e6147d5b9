"""Canonical JSON serialization for document nodes.

Used for node text rendering (str(node)). Structural conversion keeps
document key order and serializes without sorting.
"""

import json
from typing import Any


def canonical_dumps(obj: Any) -> str:
    """
    Canonical JSON serialization of plain document data.

    Rules:
    - UTF-8 (no ASCII escaping)
    - Sorted keys
    - Stable separators (",", ":")
    - NaN/Infinity rejected (not valid JSON)

    Args:
        obj: Plain JSON-compatible Python data

    Returns:
        Canonical JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )
