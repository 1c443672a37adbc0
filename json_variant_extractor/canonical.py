from __future__ import annotations

import json
from typing import Any


def canonicalize(node: Any) -> Any:
    """Rebuild a schema with sorted mapping keys so equal shapes compare equal.

    Sequences keep their order, except a union `type` list whose tags are
    sorted: the union is a set and merge order must not change its key.
    """
    if isinstance(node, dict):
        out = {}
        for key in sorted(node):
            value = node[key]
            if key == 'type' and isinstance(value, (list, tuple)):
                out[key] = sorted(value)
            else:
                out[key] = canonicalize(value)
        return out
    if isinstance(node, (list, tuple)):
        return [canonicalize(el) for el in node]
    return node


def canonical_key(node: Any) -> str:
    """Serialize the canonical form of a schema into a stable dedup key."""
    return json.dumps(canonicalize(node), separators=(',', ':'), ensure_ascii=False)
