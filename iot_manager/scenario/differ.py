"""Structural differ for scenario documents.

Compares two decoded documents scenario by scenario (matched by index)
on the name, triggers and steps fields. Values are compared through a
canonical serialization, so equality is order-sensitive for sequences,
insensitive to mapping key order, and sensitive to value types.
"""

import base64
import json
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any

from .values import is_mapping, is_sequence

COMPARED_FIELDS = ("name", "triggers", "steps")
NO_DIFFERENCES = "No differences found."
MISSING_MARKER = "<missing>"

_MISSING = object()


@dataclass
class FieldChange:
    """A changed field between two documents."""
    path: str
    before: str
    after: str

    def __str__(self) -> str:
        return f"{self.path}: {self.before} → {self.after}"


def canonical_dumps(value: Any) -> str:
    """Serialize a decoded value deterministically.

    Compact JSON with sorted keys. Values with no JSON counterpart
    (dates, binary, sets) are wrapped in single-key tagged mappings such
    as ``{"!date": "2024-01-01"}``, and non-string mapping keys carry
    their type, so values of different types never serialize alike.
    """
    return json.dumps(
        _normalize(value),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def find_changes(current: Any, previous: Any) -> list[FieldChange]:
    """List field changes from ``previous`` to ``current``.

    Args:
        current: The newer decoded document.
        previous: The older decoded document.

    Returns:
        Changes in scenario order, then field order. Scenarios present
        only in ``previous`` are ignored.
    """
    current_scenarios = _scenarios(current)
    previous_scenarios = _scenarios(previous)

    changes: list[FieldChange] = []
    for i, scenario in enumerate(current_scenarios):
        other = previous_scenarios[i] if i < len(previous_scenarios) else {}
        if not is_mapping(scenario):
            scenario = {}
        if not is_mapping(other):
            other = {}

        for field_name in COMPARED_FIELDS:
            after = _serialize_field(scenario, field_name)
            before = _serialize_field(other, field_name)
            if after != before:
                changes.append(FieldChange(
                    path=f"Scenario {i}.{field_name}",
                    before=before,
                    after=after,
                ))

    return changes


def diff_documents(current: Any, previous: Any) -> list[str]:
    """Describe changes from ``previous`` to ``current`` as lines.

    Returns ``["No differences found."]`` when the compared fields match.
    """
    changes = find_changes(current, previous)
    if not changes:
        return [NO_DIFFERENCES]
    return [str(c) for c in changes]


def _scenarios(document: Any) -> list:
    scenarios = document.get("scenarios") if is_mapping(document) else None
    return list(scenarios) if is_sequence(scenarios) else []


def _serialize_field(scenario: dict, field_name: str) -> str:
    value = scenario.get(field_name, _MISSING)
    if value is _MISSING:
        return MISSING_MARKER
    return canonical_dumps(value)


def _normalize(value: Any) -> Any:
    """Map a decoded value onto JSON types without losing its type."""
    if isinstance(value, dict):
        return {_normalize_key(k): _normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    if isinstance(value, datetime):
        return {"!datetime": value.isoformat()}
    if isinstance(value, date):
        return {"!date": value.isoformat()}
    if isinstance(value, time):
        return {"!time": value.isoformat()}
    if isinstance(value, (bytes, bytearray)):
        return {"!binary": base64.b64encode(bytes(value)).decode("ascii")}
    if isinstance(value, (set, frozenset)):
        return {"!set": [_normalize(v) for v in sorted(value, key=canonical_dumps)]}
    return value


def _normalize_key(key: Any) -> str:
    """Encode a mapping key as a string that keeps its type distinct.

    Non-string keys become ``!{type}:{key}``. String keys starting with
    ``!`` gain a second ``!``, so neither form can collide with the other
    or with the value tags above.
    """
    if isinstance(key, str):
        return f"!{key}" if key.startswith("!") else key
    if isinstance(key, (date, time)):
        key_text = key.isoformat()
    else:
        key_text = str(key)
    return f"!{type(key).__name__}:{key_text}"
