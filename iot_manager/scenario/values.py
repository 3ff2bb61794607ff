"""Classification of decoded YAML values.

Validation rules are written against a small set of value kinds rather
than raw Python types, so that booleans are never mistaken for numbers
and empty containers are never mistaken for missing values.
"""

import math
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Kinds of values a YAML document can decode to."""
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    NULL = "null"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OTHER = "other"


def kind_of(value: Any) -> ValueKind:
    """Classify a decoded value.

    Args:
        value: Any value produced by the YAML loader.

    Returns:
        The matching ValueKind. Dates, binary blobs and other scalar
        types map to OTHER.
    """
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return ValueKind.BOOL
    if value is None:
        return ValueKind.NULL
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, dict):
        return ValueKind.MAPPING
    return ValueKind.OTHER


def is_truthy(value: Any) -> bool:
    """Truthiness as used by scenario checks.

    Null, false, zero, NaN and the empty string are falsy. Every other
    value is truthy, including empty sequences and mappings.
    """
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return False
    if kind is ValueKind.BOOL:
        return value
    if kind is ValueKind.NUMBER:
        return value != 0 and not math.isnan(value)
    if kind is ValueKind.STRING:
        return value != ""
    return True


def is_nonempty_string(value: Any) -> bool:
    """True for a string with at least one character."""
    return kind_of(value) is ValueKind.STRING and value != ""


def is_sequence(value: Any) -> bool:
    """True for a list or tuple."""
    return kind_of(value) is ValueKind.SEQUENCE


def is_mapping(value: Any) -> bool:
    """True for a dict."""
    return kind_of(value) is ValueKind.MAPPING
