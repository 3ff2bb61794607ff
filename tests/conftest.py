"""Shared fixtures for scenario manager tests."""

import copy

import pytest

from iot_manager.config import ManagerConfig
from iot_manager.runner.manager import ScenarioManager
from iot_manager.vault.notes import render_note
from iot_manager.vault.store import FileVault

VALID_DOCUMENT = {
    "scenarios": [
        {
            "id": "scn_1",
            "name": "Good morning",
            "icon": "sun",
            "devices": ["lamp-1"],
            "triggers": [
                {"trigger": {"type": "scenario.trigger.voice", "value": "Доброе утро"}},
                {
                    "trigger": {
                        "type": "scenario.trigger.timetable",
                        "value": {
                            "condition": {"type": "specific_time", "value": "07:00"},
                            "days_of_week": ["monday", "friday"],
                        },
                    }
                },
            ],
            "steps": [
                {
                    "type": "scenarios.steps.actions.v2",
                    "parameters": {
                        "items": [
                            {"id": "lamp-1", "type": "step.action.item.device"},
                            {"id": "kettle", "type": "step.action.item.device"},
                        ]
                    },
                }
            ],
        }
    ]
}

VALID_YAML = """scenarios:
  - id: scn_1
    name: Good morning
    triggers:
      - trigger:
          type: scenario.trigger.voice
          value: Hello
    steps:
      - type: scenarios.steps.actions.v2
        parameters:
          items:
            - id: lamp-1
              type: step.action.item.device
"""


@pytest.fixture
def valid_document() -> dict:
    """A fresh copy of a valid decoded document."""
    return copy.deepcopy(VALID_DOCUMENT)


@pytest.fixture
def vault(tmp_path) -> FileVault:
    return FileVault(tmp_path / "vault")


@pytest.fixture
def manager(vault) -> ScenarioManager:
    return ScenarioManager(vault=vault, config=ManagerConfig(vault_root=vault.root))


@pytest.fixture
def lights_note(vault) -> str:
    """A note with a valid scenario block."""
    return vault.write_text("Lights.md", render_note("Lights", VALID_YAML))
