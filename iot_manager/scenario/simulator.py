"""Textual simulation of scenario execution.

Nothing is executed; the trace only describes which triggers would
start each scenario and which device actions its steps would run.
"""

import json
from datetime import date, time
from typing import Any

from .schema import ScenarioDocument, Step, Trigger

NO_ACTIONS = "No actions"


def simulate(document: ScenarioDocument) -> list[str]:
    """Build an execution trace for every scenario in a document.

    Args:
        document: Parsed scenario document.

    Returns:
        Trace lines, one header per scenario followed by its indented
        trigger and step lines.
    """
    lines: list[str] = []
    for i, scenario in enumerate(document.scenarios):
        lines.append(f"Scenario {i}: {scenario.name}")
        for j, trigger in enumerate(scenario.triggers):
            lines.append(f"  Trigger {j}: {trigger.type} -> {format_trigger_value(trigger)}")
        for k, step in enumerate(scenario.steps):
            lines.append(f"  Step {k}: {step.type} -> {format_step_actions(step)}")
    return lines


def format_trigger_value(trigger: Trigger) -> str:
    """Render a trigger value: strings as-is, anything else as compact JSON in document order."""
    if isinstance(trigger.value, str):
        return trigger.value
    return json.dumps(
        trigger.value,
        ensure_ascii=False,
        separators=(",", ":"),
        default=_json_default,
    )


def format_step_actions(step: Step) -> str:
    """Render a step's items as ``type (id)`` pairs, or the no-actions placeholder."""
    actions = ", ".join(f"{item.type} ({item.id})" for item in step.items)
    return actions or NO_ACTIONS


def _json_default(value: Any) -> Any:
    """Render YAML scalars with no JSON counterpart."""
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return list(value)
    return str(value)
