"""Canonical JSON serialization for Chainium transactions."""

import json
from decimal import Decimal
from typing import Any, Mapping, Sequence

from ..exceptions import SerializationError

__all__ = [
    "format_decimal",
    "to_canonical_json",
]

INDENT = "    "

# Escapes the ledger's reference encoder applies beyond standard JSON
_EXTRA_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def format_decimal(value: Decimal) -> str:
    """
    Format Decimal as an exact JSON number literal.

    Integral values have no fractional part ("1000"), others use plain
    positional notation with trailing zeros removed ("0.01"). Exponent
    notation is never produced.

    Raises:
        SerializationError: If value is not finite
    """
    if not value.is_finite():
        raise SerializationError(f"Cannot serialize non-finite number: {value}")

    if value == value.to_integral_value():
        return str(int(value))

    return format(value.normalize(), "f")


def _encode_string(value: str) -> str:
    encoded = json.dumps(value, ensure_ascii=False)
    for char, escape in _EXTRA_ESCAPES.items():
        encoded = encoded.replace(char, escape)
    return encoded


def _encode(value: Any, indent: bool, level: int) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        return format_decimal(value)
    if isinstance(value, str):
        return _encode_string(value)
    if isinstance(value, (bytes, bytearray)):
        raise SerializationError("Cannot serialize raw bytes; encode them first")
    if isinstance(value, Mapping):
        items = [
            (_encode_string(str(key)), _encode(item, indent, level + 1))
            for key, item in value.items()
        ]
        if not items:
            return "{}"
        if not indent:
            return "{" + ",".join(f"{k}:{v}" for k, v in items) + "}"
        inner = INDENT * (level + 1)
        body = ",\n".join(f"{inner}{k}: {v}" for k, v in items)
        return "{\n" + body + "\n" + INDENT * level + "}"
    if isinstance(value, Sequence):
        items = [_encode(item, indent, level + 1) for item in value]
        if not items:
            return "[]"
        if not indent:
            return "[" + ",".join(items) + "]"
        inner = INDENT * (level + 1)
        body = ",\n".join(f"{inner}{item}" for item in items)
        return "[\n" + body + "\n" + INDENT * level + "]"

    raise SerializationError(f"Cannot serialize value of type {type(value).__name__}")


def to_canonical_json(data: Any, indent: bool = False) -> str:
    """
    Serialize data to the ledger's canonical JSON.

    Mapping keys keep their insertion order. Floats are rejected; amounts
    must be Decimal so the output is exact.

    Args:
        data: Nested mappings, sequences, str, int, bool, Decimal or None
        indent: Pretty-print with four-space indentation

    Returns:
        JSON text

    Raises:
        SerializationError: If data contains an unsupported type
    """
    return _encode(data, indent, 0)
