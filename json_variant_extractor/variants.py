from __future__ import annotations

import logging
from typing import Any, Dict, List

from .canonical import canonical_key, canonicalize
from .json_types import as_document_list
from .schema_utils import extract_schema

logger = logging.getLogger(__name__)


def collect_variants(document: Any) -> List[Dict[str, Any]]:
    """Group the items of a document by schema and keep one example per schema.

    A top-level list is treated as a batch of items; any other value is a
    single item. Returns `{'schema': ..., 'example': ...}` entries in the
    order each schema was first seen, with the first matching item as the
    example.
    """
    items = as_document_list(document)
    seen: Dict[str, Dict[str, Any]] = {}

    for item in items:
        canon = canonicalize(extract_schema(item))
        key = canonical_key(canon)
        if key not in seen:
            seen[key] = {'schema': canon, 'example': item}

    logger.debug("Found %d schema variants across %d items", len(seen), len(items))
    return list(seen.values())
