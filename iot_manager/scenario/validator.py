"""Scenario validator.

Checks decoded scenario YAML against the document structure. Every
violation is collected; validation never stops at the first error.
"""

from typing import Any

from .schema import ValidationError, ValidationResult
from .values import is_mapping, is_nonempty_string, is_sequence, is_truthy


def validate_document(data: Any) -> ValidationResult:
    """Validate a decoded scenario document.

    Checks, per scenario:
    - id and name are non-empty strings
    - triggers is a list; each trigger has a type and a value key
    - steps is a list; each step has a type and a list of items

    Args:
        data: Value returned by the YAML loader.

    Returns:
        ValidationResult with errors in document order.
    """
    errors: list[ValidationError] = []

    scenarios = data.get("scenarios") if is_mapping(data) else None
    if not is_sequence(scenarios):
        errors.append(ValidationError(
            path="",
            message="scenarios missing or not an array",
        ))
        return ValidationResult(errors=errors)

    for i, scenario in enumerate(scenarios):
        if not is_mapping(scenario):
            scenario = {}
        path = f"Scenario {i}"

        if not is_nonempty_string(scenario.get("id")):
            errors.append(ValidationError(path=path, message="id invalid"))
        if not is_nonempty_string(scenario.get("name")):
            errors.append(ValidationError(path=path, message="name invalid"))

        _validate_triggers(scenario.get("triggers"), path, errors)
        _validate_steps(scenario.get("steps"), path, errors)

    return ValidationResult(errors=errors)


def validate(data: Any) -> list[str]:
    """Validate a decoded scenario document, returning error messages.

    An empty list means the document is valid.
    """
    return validate_document(data).messages


def _validate_triggers(
    triggers: Any,
    path: str,
    errors: list[ValidationError],
) -> None:
    """Validate the triggers list of one scenario."""
    if not is_sequence(triggers):
        errors.append(ValidationError(
            path=path,
            message="triggers missing or not an array",
        ))
        return

    for j, entry in enumerate(triggers):
        trigger_path = f"{path}, Trigger {j}"
        body = entry.get("trigger") if is_mapping(entry) else None
        if not is_mapping(body):
            body = {}

        if not is_nonempty_string(body.get("type")):
            errors.append(ValidationError(path=trigger_path, message="type invalid"))
        # Presence only: null, false, 0 and "" are all accepted values.
        if "value" not in body:
            errors.append(ValidationError(path=trigger_path, message="value missing"))


def _validate_steps(
    steps: Any,
    path: str,
    errors: list[ValidationError],
) -> None:
    """Validate the steps list of one scenario."""
    if not is_sequence(steps):
        errors.append(ValidationError(
            path=path,
            message="steps missing or not an array",
        ))
        return

    for k, step in enumerate(steps):
        if not is_mapping(step):
            step = {}
        parameters = step.get("parameters")
        items = parameters.get("items") if is_mapping(parameters) else None

        if not is_truthy(step.get("type")) or not is_sequence(items):
            errors.append(ValidationError(
                path=f"{path}, Step {k}",
                message="invalid structure",
            ))
