"""Unit tests for scenario document validation."""

import pytest

from iot_manager.scenario.schema import ValidationError
from iot_manager.scenario.validator import validate, validate_document


def _scenario(**overrides) -> dict:
    scenario = {
        "id": "s1",
        "name": "Lights",
        "triggers": [{"trigger": {"type": "scenario.trigger.voice", "value": "on"}}],
        "steps": [{"type": "scenarios.steps.actions.v2", "parameters": {"items": []}}],
    }
    scenario.update(overrides)
    return scenario


class TestDocumentLevel:
    """Checks on the top-level scenarios list."""

    def test_missing_scenarios_key(self) -> None:
        """A document without scenarios yields exactly one error."""
        assert validate({"other": 1}) == ["scenarios missing or not an array"]

    @pytest.mark.parametrize("data", [None, "text", 42, [], {"scenarios": "x"}, {"scenarios": {}}])
    def test_non_document_inputs(self, data) -> None:
        """Non-mapping documents and non-list scenarios are reported, not raised."""
        assert validate(data) == ["scenarios missing or not an array"]

    def test_empty_scenarios_is_valid(self) -> None:
        assert validate({"scenarios": []}) == []

    def test_valid_document(self, valid_document) -> None:
        result = validate_document(valid_document)
        assert result.valid is True
        assert result.errors == []
        assert str(result) == "Valid"


class TestScenarioFields:
    """Checks on id and name."""

    @pytest.mark.parametrize("value", [None, "", 0, 12, True, ["a"], {"a": 1}])
    def test_invalid_id(self, value) -> None:
        assert validate({"scenarios": [_scenario(id=value)]}) == ["Scenario 0: id invalid"]

    def test_missing_name(self) -> None:
        scenario = _scenario()
        del scenario["name"]
        assert validate({"scenarios": [scenario]}) == ["Scenario 0: name invalid"]

    def test_non_mapping_scenario_reports_every_field(self) -> None:
        assert validate({"scenarios": [None]}) == [
            "Scenario 0: id invalid",
            "Scenario 0: name invalid",
            "Scenario 0: triggers missing or not an array",
            "Scenario 0: steps missing or not an array",
        ]

    def test_errors_accumulate_across_scenarios(self) -> None:
        """Each invalid field in each scenario is reported in order."""
        data = {"scenarios": [_scenario(id=""), _scenario(name=None)]}
        assert validate(data) == [
            "Scenario 0: id invalid",
            "Scenario 1: name invalid",
        ]


class TestTriggers:
    """Checks on the triggers list."""

    @pytest.mark.parametrize("triggers", [None, "voice", {"trigger": {}}])
    def test_triggers_not_a_list(self, triggers) -> None:
        assert validate({"scenarios": [_scenario(triggers=triggers)]}) == [
            "Scenario 0: triggers missing or not an array",
        ]

    def test_empty_triggers_is_valid(self) -> None:
        assert validate({"scenarios": [_scenario(triggers=[])]}) == []

    def test_value_missing(self) -> None:
        data = {"scenarios": [_scenario(triggers=[{"trigger": {"type": "t"}}])]}
        assert validate(data) == ["Scenario 0, Trigger 0: value missing"]

    @pytest.mark.parametrize("value", [None, "", 0, False, {}, []])
    def test_value_presence_is_enough(self, value) -> None:
        """Any value, including falsy ones, counts once the key is present."""
        data = {"scenarios": [_scenario(triggers=[{"trigger": {"type": "t", "value": value}}])]}
        assert validate(data) == []

    @pytest.mark.parametrize("trigger_type", [None, "", 5, ["t"]])
    def test_type_invalid(self, trigger_type) -> None:
        data = {"scenarios": [_scenario(triggers=[{"trigger": {"type": trigger_type, "value": "x"}}])]}
        assert validate(data) == ["Scenario 0, Trigger 0: type invalid"]

    @pytest.mark.parametrize("entry", [1, "trigger", {}, {"trigger": None}, {"trigger": "voice"}])
    def test_malformed_trigger_entry(self, entry) -> None:
        """A trigger without a mapping body reports both type and value."""
        data = {"scenarios": [_scenario(triggers=[entry])]}
        assert validate(data) == [
            "Scenario 0, Trigger 0: type invalid",
            "Scenario 0, Trigger 0: value missing",
        ]

    def test_trigger_errors_keep_trigger_order(self) -> None:
        triggers = [
            {"trigger": {"type": "ok", "value": 1}},
            {"trigger": {"value": 1}},
            {"trigger": {"type": "ok"}},
        ]
        assert validate({"scenarios": [_scenario(triggers=triggers)]}) == [
            "Scenario 0, Trigger 1: type invalid",
            "Scenario 0, Trigger 2: value missing",
        ]


class TestSteps:
    """Checks on the steps list."""

    def test_steps_not_a_list(self) -> None:
        assert validate({"scenarios": [_scenario(steps="none")]}) == [
            "Scenario 0: steps missing or not an array",
        ]

    def test_items_not_a_list(self) -> None:
        steps = [{"type": "s", "parameters": {"items": "not-an-array"}}]
        assert validate({"scenarios": [_scenario(steps=steps)]}) == [
            "Scenario 0, Step 0: invalid structure",
        ]

    @pytest.mark.parametrize("step", [
        None,
        {"parameters": {"items": []}},
        {"type": "", "parameters": {"items": []}},
        {"type": 0, "parameters": {"items": []}},
        {"type": "s"},
        {"type": "s", "parameters": None},
        {"type": "s", "parameters": {}},
    ])
    def test_invalid_structure(self, step) -> None:
        assert validate({"scenarios": [_scenario(steps=[step])]}) == [
            "Scenario 0, Step 0: invalid structure",
        ]

    def test_empty_items_are_valid(self) -> None:
        steps = [{"type": "s", "parameters": {"items": []}}]
        assert validate({"scenarios": [_scenario(steps=steps)]}) == []

    def test_non_string_truthy_type_is_accepted(self) -> None:
        steps = [{"type": 7, "parameters": {"items": []}}]
        assert validate({"scenarios": [_scenario(steps=steps)]}) == []


class TestErrorOrdering:
    """Errors come out scenario by scenario, fields in a fixed order."""

    def test_full_order(self) -> None:
        data = {
            "scenarios": [
                {
                    "triggers": [{"trigger": {"type": "t"}}],
                    "steps": [{"type": "s"}],
                },
                {"id": "ok", "name": "ok", "triggers": None, "steps": None},
            ]
        }
        assert validate(data) == [
            "Scenario 0: id invalid",
            "Scenario 0: name invalid",
            "Scenario 0, Trigger 0: value missing",
            "Scenario 0, Step 0: invalid structure",
            "Scenario 1: triggers missing or not an array",
            "Scenario 1: steps missing or not an array",
        ]

    def test_result_carries_paths(self) -> None:
        result = validate_document({"scenarios": [_scenario(id=None)]})
        assert result.valid is False
        assert result.error_count == 1
        assert result.errors == [ValidationError(path="Scenario 0", message="id invalid")]
        assert str(result) == "Invalid: 1 errors"

    def test_document_level_error_has_no_path(self) -> None:
        error = validate_document({}).errors[0]
        assert error.path == ""
        assert str(error) == "scenarios missing or not an array"
