"""Scenario module - YAML scenario parsing, validation and diffing."""

from .schema import (
    Item,
    Scenario,
    ScenarioDocument,
    Step,
    Trigger,
    TriggerType,
    ValidationError,
    ValidationResult,
)
from .parser import (
    ScenarioParseError,
    dump_yaml,
    load_yaml,
    parse_document_data,
    parse_document_text,
)
from .validator import validate, validate_document
from .differ import FieldChange, canonical_dumps, diff_documents, find_changes
from .simulator import simulate
from .templates import build_template
from .values import ValueKind, is_truthy, kind_of

__all__ = [
    "Item",
    "Scenario",
    "ScenarioDocument",
    "Step",
    "Trigger",
    "TriggerType",
    "ValidationError",
    "ValidationResult",
    "ScenarioParseError",
    "dump_yaml",
    "load_yaml",
    "parse_document_data",
    "parse_document_text",
    "validate",
    "validate_document",
    "FieldChange",
    "canonical_dumps",
    "diff_documents",
    "find_changes",
    "simulate",
    "build_template",
    "ValueKind",
    "is_truthy",
    "kind_of",
]
