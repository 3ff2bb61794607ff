"""Scenario data models for smart-home automation documents.

Defines dataclasses for parsing and representing YAML scenario documents.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class TriggerType(str, Enum):
    """Trigger kinds offered by the template generator."""
    VOICE = "scenario.trigger.voice"
    TIMETABLE = "scenario.trigger.timetable"

    @property
    def label(self) -> str:
        """Human-readable name, also used in template note names."""
        return self.name.capitalize()


DEFAULT_STEP_TYPE = "scenarios.steps.actions.v2"


@dataclass
class Item:
    """A device action inside a step."""
    id: str
    type: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type}


@dataclass
class Trigger:
    """A condition that starts a scenario."""
    type: str
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"trigger": {"type": self.type, "value": self.value}}


@dataclass
class Step:
    """An action block executed when a scenario fires."""
    type: str
    items: list[Item] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "parameters": {"items": [item.to_dict() for item in self.items]},
        }


@dataclass
class Scenario:
    """One automation rule."""
    id: str
    name: str
    triggers: list[Trigger] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    icon: Optional[str] = None
    devices: Optional[list[str]] = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert scenario to dictionary for serialization."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "triggers": [t.to_dict() for t in self.triggers],
            "steps": [s.to_dict() for s in self.steps],
        }
        if self.icon is not None:
            data["icon"] = self.icon
        if self.devices is not None:
            data["devices"] = list(self.devices)
        data.update(self.extra)
        return data


@dataclass
class ScenarioDocument:
    """A complete scenario document."""
    scenarios: list[Scenario] = field(default_factory=list)

    @property
    def total_scenarios(self) -> int:
        return len(self.scenarios)

    def to_dict(self) -> dict[str, Any]:
        return {"scenarios": [s.to_dict() for s in self.scenarios]}


@dataclass
class ValidationError:
    """A single validation error."""
    path: str
    message: str

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


@dataclass
class ValidationResult:
    """Result of scenario document validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def messages(self) -> list[str]:
        """Errors rendered as display strings, in document order."""
        return [str(e) for e in self.errors]

    def __str__(self) -> str:
        if self.valid:
            return "Valid"
        return f"Invalid: {self.error_count} errors"
