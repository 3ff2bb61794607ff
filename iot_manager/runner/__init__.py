"""Runner module - command orchestration."""

from .manager import Chooser, CommandFailed, CommandResult, ScenarioManager

__all__ = [
    "Chooser",
    "CommandFailed",
    "CommandResult",
    "ScenarioManager",
]
