from __future__ import annotations

from typing import Any, Dict, Iterable, List

from .coordinates import is_coordinate_string
from .json_types import JsonType, classify_value

# Type of the schema produced by merging nothing, e.g. the items of [].
EMPTY_SCHEMA_TYPE: List[str] = []


def schema_types(schema: Dict[str, Any]) -> List[str]:
    """Return the type tags of a schema node as a list (a single tag becomes [tag])."""
    tags = schema.get('type', EMPTY_SCHEMA_TYPE)
    if isinstance(tags, (list, tuple)):
        return list(tags)
    return [tags]


def extract_schema(value: Any) -> Dict[str, Any]:
    """Build a schema tree describing the shape of one JSON value.

    Objects list a schema for every key. Arrays carry a single `items`
    schema merged from all of their elements. Strings in the 'geo:lat,lng'
    form are flagged with `coordinate: True`.
    """
    kind = classify_value(value)

    if kind is JsonType.OBJECT:
        schema: Dict[str, Any] = {
            'type': kind.value,
            'properties': {k: extract_schema(v) for k, v in value.items()},
        }
    elif kind is JsonType.ARRAY:
        schema = {
            'type': kind.value,
            'items': merge_schemas([extract_schema(el) for el in value]),
        }
    else:
        schema = {'type': kind.value}

    if kind is JsonType.STRING and is_coordinate_string(value):
        schema['coordinate'] = True
    return schema


def merge_schemas(schemas: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """Unify schemas observed for the same slot into one schema.

    Differing types become a union (a list of tags in first-seen order).
    Properties are merged per key across only the objects that have the
    key, so a key missing from some objects is not marked optional.
    Array items are pooled and merged the same way.

    Merging an empty sequence returns `{'type': []}`, which contributes no
    tags when merged again.
    """
    schemas = list(schemas)

    tags: List[str] = []
    object_schemas: List[Dict[str, Any]] = []
    array_schemas: List[Dict[str, Any]] = []
    has_coordinate = False

    for sch in schemas:
        sch_tags = schema_types(sch)
        for tag in sch_tags:
            if tag not in tags:
                tags.append(tag)
        if JsonType.OBJECT.value in sch_tags:
            object_schemas.append(sch)
        if JsonType.ARRAY.value in sch_tags:
            array_schemas.append(sch)
        if sch.get('coordinate'):
            has_coordinate = True

    result: Dict[str, Any] = {'type': tags[0] if len(tags) == 1 else tags}

    if object_schemas:
        pooled: Dict[str, List[Dict[str, Any]]] = {}
        for obj_sch in object_schemas:
            for key, prop_sch in (obj_sch.get('properties') or {}).items():
                pooled.setdefault(key, []).append(prop_sch)
        result['properties'] = {key: merge_schemas(group) for key, group in pooled.items()}

    if array_schemas:
        result['items'] = merge_schemas(
            arr_sch['items'] for arr_sch in array_schemas if 'items' in arr_sch
        )

    if has_coordinate:
        result['coordinate'] = True
    return result
