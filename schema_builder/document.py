from __future__ import annotations

import json
from typing import Any, Dict, Iterable

from .fields import Field, is_nested

PLACEHOLDER_VALUES: Dict[str, Any] = {
    'string': "STRING",
    'number': "number",
    'objectId': "ObjectId",
    'float': "float",
    'boolean': "boolean",
    'array': [],
}


def placeholder_for(type_tag: str) -> Any:
    """Return the example value shown for a non-nested field type.

    Unknown or empty tags map to an empty string.
    """
    value = PLACEHOLDER_VALUES.get(type_tag, "")
    if isinstance(value, list):
        return list(value)
    return value


def serialize(fields: Iterable[Field]) -> Dict[str, Any]:
    """Mirror the field tree into a nested key/placeholder document.

    Keys follow input order. When siblings share a key, the later one wins.
    """
    document: Dict[str, Any] = {}
    for field in fields:
        if is_nested(field):
            document[field.key] = serialize(field.children)
        else:
            document[field.key] = placeholder_for(field.type)
    return document


def format_document(document: Dict[str, Any], indent: int = 2) -> str:
    return json.dumps(document, indent=indent, ensure_ascii=False)
