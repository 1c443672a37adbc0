from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, NamedTuple, Optional, Set, Tuple

from .json_types import as_document_list

logger = logging.getLogger(__name__)

# 'geo:<lat>,<lng>' with optional whitespace around the numbers.
COORDINATE_PATTERN = re.compile(
    r'geo:\s*(-?[0-9]+(?:\.[0-9]+)?)\s*,\s*(-?[0-9]+(?:\.[0-9]+)?)',
    re.IGNORECASE,
)


class CoordinatePair(NamedTuple):
    lat: float
    lng: float

    def as_dict(self) -> Dict[str, float]:
        return {'lat': self.lat, 'lng': self.lng}


def _match_coordinate(value: Any) -> Optional[re.Match]:
    if not isinstance(value, str):
        return None
    return COORDINATE_PATTERN.fullmatch(value.strip())


def is_coordinate_string(value: Any) -> bool:
    """Check whether a value is a 'geo:lat,lng' string."""
    return _match_coordinate(value) is not None


def parse_coordinate_string(value: Any) -> Optional[Tuple[float, float]]:
    """Parse a 'geo:lat,lng' string into (lat, lng), or None if it does not match."""
    match = _match_coordinate(value)
    if match is None:
        return None
    return float(match.group(1)), float(match.group(2))


def collect_coordinates(document: Any) -> List[CoordinatePair]:
    """Find every coordinate string in a document, in depth-first pre-order.

    A top-level list is treated as a batch of items; any other value is a
    single item. Object keys are never inspected, only their values.
    Pairs are deduplicated on the matched text of both numbers, so
    'geo:1.0,2' and 'geo:1,2' are kept as two pairs.
    """
    pairs: List[CoordinatePair] = []
    seen: Set[str] = set()

    # Children are pushed in reverse so they pop in document order.
    stack: List[Any] = list(reversed(as_document_list(document)))
    while stack:
        node = stack.pop()
        if isinstance(node, str):
            match = _match_coordinate(node)
            if match is None:
                continue
            key = f"{match.group(1)},{match.group(2)}"
            if key in seen:
                continue
            seen.add(key)
            pairs.append(CoordinatePair(float(match.group(1)), float(match.group(2))))
        elif isinstance(node, (list, tuple)):
            stack.extend(reversed(node))
        elif isinstance(node, dict):
            stack.extend(reversed(list(node.values())))

    logger.debug("Collected %d unique coordinate pairs", len(pairs))
    return pairs
