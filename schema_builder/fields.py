from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Literal, Optional, Tuple
from uuid import uuid4

STRING = 'string'
NESTED = 'nested'

FIELD_TYPES: Tuple[str, ...] = (
    STRING,
    'number',
    'float',
    'boolean',
    'objectId',
    'array',
    NESTED,
)

FieldType = Literal['string', 'number', 'float', 'boolean', 'objectId', 'array', 'nested']

PATCHABLE_ATTRIBUTES: Tuple[str, ...] = ('key', 'type', 'required', 'children')


@dataclass(frozen=True)
class Field:
    """One node of the schema tree.

    `id` addresses the node for mutation and never changes.
    `children` is only meaningful when `type` is 'nested'.
    """
    id: str
    key: str = ''
    type: FieldType = STRING
    required: bool = False
    children: Tuple['Field', ...] = ()


def create_default_field() -> Field:
    return Field(id=uuid4().hex)


def is_nested(field: Field) -> bool:
    return field.type == NESTED


def iter_fields(fields: Iterable[Field]) -> Iterator[Field]:
    """Yield every field depth-first, descending only into nested fields."""
    for field in fields:
        yield field
        if is_nested(field) and field.children:
            yield from iter_fields(field.children)


def find_field(fields: Iterable[Field], field_id: str) -> Optional[Field]:
    for field in iter_fields(fields):
        if field.id == field_id:
            return field
    return None
