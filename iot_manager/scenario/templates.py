"""Scenario template generation."""

import copy
import time
from typing import Any, Optional

from .schema import (
    DEFAULT_STEP_TYPE,
    Scenario,
    ScenarioDocument,
    Step,
    Trigger,
    TriggerType,
)

TEMPLATE_SCENARIO_NAME = "New Scenario"

DEFAULT_TRIGGER_VALUES: dict[TriggerType, Any] = {
    TriggerType.VOICE: "Привет",
    TriggerType.TIMETABLE: {
        "condition": {
            "type": "solar",
            "value": {"solar": "sunrise", "offset": 3600},
        },
    },
}


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def build_template(
    trigger_type: TriggerType,
    timestamp_ms: Optional[int] = None,
) -> ScenarioDocument:
    """Build a one-scenario document for the given trigger kind.

    Args:
        trigger_type: Kind of trigger the scenario starts with.
        timestamp_ms: Timestamp used for the scenario id. Defaults to now.

    Returns:
        A document with a single scenario, one trigger carrying the
        default value for its kind, and one empty action step.
    """
    if timestamp_ms is None:
        timestamp_ms = now_ms()

    scenario = Scenario(
        id=f"scenario_{timestamp_ms}",
        name=TEMPLATE_SCENARIO_NAME,
        triggers=[Trigger(
            type=trigger_type.value,
            value=copy.deepcopy(DEFAULT_TRIGGER_VALUES[trigger_type]),
        )],
        steps=[Step(type=DEFAULT_STEP_TYPE)],
    )
    return ScenarioDocument(scenarios=[scenario])


def template_note_name(trigger_type: TriggerType, timestamp_ms: int) -> str:
    """Note name for a template, e.g. ``Scenario_Voice_1700000000000``."""
    return f"Scenario_{trigger_type.label}_{timestamp_ms}"
