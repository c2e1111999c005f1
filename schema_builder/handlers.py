from __future__ import annotations

import logging
from typing import Optional, Tuple

from . import config
from .document import format_document, serialize
from .fields import STRING, Field, find_field
from .tree_ops import add_field, delete_field, update_field

logger = logging.getLogger(__name__)

Fields = Tuple[Field, ...]


def _as_fields(fields) -> Fields:
    # gr.State starts out as None until a value has been assigned.
    if fields is None:
        return ()
    return tuple(fields)


def initial_fields() -> Fields:
    return ()


def handle_add_root(fields):
    fields = add_field(_as_fields(fields))
    logger.info("Added root field (%d root fields)", len(fields))
    return fields


def handle_add_child(parent_id: str, fields):
    logger.info("Adding nested field under %s", parent_id)
    return add_field(_as_fields(fields), parent_id)


def handle_key_change(field_id: str, value, fields):
    return update_field(_as_fields(fields), field_id, {'key': value or ''})


def handle_type_change(field_id: str, value, fields):
    return update_field(_as_fields(fields), field_id, {'type': value or STRING})


def handle_required_change(field_id: str, value, fields):
    return update_field(_as_fields(fields), field_id, {'required': bool(value)})


def handle_delete(field_id: str, fields):
    fields = _as_fields(fields)
    target = find_field(fields, field_id)
    if target is None:
        logger.warning("Delete requested for unknown field %s", field_id)
    else:
        logger.info("Deleting field %r (%s) with %d children", target.key, field_id, len(target.children))
    return delete_field(fields, field_id)


def render_document_handler(fields, indent: Optional[int] = None) -> str:
    if indent is None:
        indent = config.JSON_INDENT
    return format_document(serialize(_as_fields(fields)), indent=indent)
