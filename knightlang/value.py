"""Runtime values and their type tags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .errors import KnightError


class ValueType(IntEnum):
    NUMBER = 0
    STRING = 1
    BOOLEAN = 2
    NULL = 3
    BLOCK = 4
    LIST = 5


@dataclass(frozen=True)
class Value:
    """A tagged runtime value."""

    type: ValueType
    payload: Any = None


_CREATABLE = frozenset(
    {ValueType.NUMBER, ValueType.STRING, ValueType.BOOLEAN, ValueType.NULL, ValueType.BLOCK}
)


def create_string(text: str) -> Value:
    """Build a string value holding ``text``."""
    return Value(ValueType.STRING, str(text))


def create_value(value_type: ValueType, payload: Any) -> Value:
    """Build a value of ``value_type``; lists cannot be created this way."""
    if value_type not in _CREATABLE:
        raise KnightError("Invalid type for value creation")
    if value_type is ValueType.NUMBER:
        return Value(ValueType.NUMBER, int(payload))
    if value_type is ValueType.BOOLEAN:
        return Value(ValueType.BOOLEAN, bool(payload))
    if value_type is ValueType.STRING:
        return create_string(payload)
    if value_type is ValueType.NULL:
        return Value(ValueType.NULL, None)
    return Value(ValueType.BLOCK, payload)


_COERCE_NAMES = {
    ValueType.NUMBER: "number",
    ValueType.STRING: "string",
    ValueType.BOOLEAN: "boolean",
    ValueType.LIST: "list",
}


def coerce(value: Value, value_type: ValueType) -> Value:
    """Return ``value`` if it already has ``value_type``; otherwise raise."""
    if value.type is value_type:
        return value
    if value_type is ValueType.NULL:
        raise KnightError("Cannot coerce to null type")
    if value_type is ValueType.BLOCK:
        raise KnightError("Cannot coerce to block type")
    raise KnightError(f"Cannot coerce v to {_COERCE_NAMES[value_type]} type")