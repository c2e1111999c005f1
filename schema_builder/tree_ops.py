from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, Iterable, Optional, Tuple

from .fields import NESTED, PATCHABLE_ATTRIBUTES, Field, create_default_field, is_nested

logger = logging.getLogger(__name__)

Fields = Tuple[Field, ...]


def _clean_patch(patch: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only patchable attributes; `children` is stored as a tuple."""
    changes: Dict[str, Any] = {}
    for name, value in (patch or {}).items():
        if name not in PATCHABLE_ATTRIBUTES:
            logger.debug("Ignoring non-patchable attribute %r", name)
            continue
        if name == 'children':
            value = tuple(value or ())
        changes[name] = value

    # A field that stops being nested drops its children.
    if 'type' in changes and changes['type'] != NESTED and 'children' not in changes:
        changes['children'] = ()
    return changes


def update_field(fields: Iterable[Field], field_id: str, patch: Dict[str, Any]) -> Fields:
    """Return a new tree where the field with `field_id` has `patch` applied.

    Ancestors of the target are rebuilt; everything else is reused as-is.
    An unknown `field_id` leaves the tree unchanged.
    """
    changes = _clean_patch(patch)
    found = False

    def update(items: Iterable[Field]) -> Fields:
        nonlocal found
        result = []
        for item in items:
            if item.id == field_id:
                found = True
                result.append(replace(item, **changes))
            elif is_nested(item) and item.children:
                result.append(replace(item, children=update(item.children)))
            else:
                result.append(item)
        return tuple(result)

    updated = update(fields)
    if not found:
        logger.debug("update_field: no field with id %s", field_id)
    return updated


def add_field(fields: Iterable[Field], parent_id: Optional[str] = None) -> Fields:
    """Append a new default field at the root, or under `parent_id`.

    The parent may be of any type. An unknown `parent_id` is a no-op.
    """
    if not parent_id:
        return tuple(fields) + (create_default_field(),)

    found = False

    def add(items: Iterable[Field]) -> Fields:
        nonlocal found
        result = []
        for item in items:
            if item.id == parent_id:
                found = True
                result.append(replace(item, children=item.children + (create_default_field(),)))
            elif is_nested(item) and item.children:
                result.append(replace(item, children=add(item.children)))
            else:
                result.append(item)
        return tuple(result)

    updated = add(fields)
    if not found:
        logger.debug("add_field: no parent with id %s", parent_id)
    return updated


def delete_field(fields: Iterable[Field], field_id: str) -> Fields:
    """Remove the field with `field_id` and its whole subtree."""
    found = False

    def remove(items: Iterable[Field]) -> Fields:
        nonlocal found
        result = []
        for item in items:
            if item.id == field_id:
                found = True
                continue
            if is_nested(item) and item.children:
                item = replace(item, children=remove(item.children))
            result.append(item)
        return tuple(result)

    updated = remove(fields)
    if not found:
        logger.debug("delete_field: no field with id %s", field_id)
    return updated
