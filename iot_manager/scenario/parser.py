"""YAML scenario parser.

Decodes and encodes scenario YAML, and maps decoded data onto the
Scenario dataclasses.
"""

from typing import Any

import yaml

from .schema import Item, Scenario, ScenarioDocument, Step, Trigger
from .values import is_mapping, is_sequence

SCENARIO_FIELDS = ("id", "name", "triggers", "steps", "icon", "devices")


class ScenarioParseError(ValueError):
    """Raised when scenario text is not valid YAML."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def load_yaml(text: str) -> Any:
    """Decode YAML text.

    Args:
        text: YAML source. Empty text decodes to None.

    Returns:
        The decoded value.

    Raises:
        ScenarioParseError: If the text is not valid YAML.
    """
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ScenarioParseError(str(e)) from e


def dump_yaml(data: Any) -> str:
    """Encode data as block-style YAML, keeping key order and unicode."""
    return yaml.safe_dump(
        data,
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
    )


def parse_document_text(text: str, source: str = "<inline>") -> ScenarioDocument:
    """Decode YAML text and parse it into a ScenarioDocument.

    Raises:
        ScenarioParseError: If the text is not valid YAML.
        ValueError: If the decoded data is not a scenario document.
    """
    return parse_document_data(load_yaml(text), source=source)


def parse_document_data(data: Any, source: str = "<inline>") -> ScenarioDocument:
    """Parse a scenario document from already loaded YAML.

    Args:
        data: Decoded YAML value.
        source: Source identifier for error messages.

    Returns:
        Parsed ScenarioDocument.

    Raises:
        ValueError: If required structure is missing or malformed.
    """
    if data is None:
        return ScenarioDocument()

    if not is_mapping(data):
        raise ValueError(f"Document must be a YAML mapping, got {type(data).__name__}")

    scenarios_data = data.get("scenarios", [])
    if not is_sequence(scenarios_data):
        raise ValueError(f"'scenarios' must be a list in {source}")

    scenarios = [
        _parse_scenario(s, f"scenarios[{i}]", source)
        for i, s in enumerate(scenarios_data)
    ]
    return ScenarioDocument(scenarios=scenarios)


def _parse_scenario(data: Any, context: str, source: str) -> Scenario:
    if not is_mapping(data):
        raise ValueError(f"{context} must be a mapping in {source}")

    triggers_data = data.get("triggers") or []
    steps_data = data.get("steps") or []
    _require_list(triggers_data, f"{context}.triggers", source)
    _require_list(steps_data, f"{context}.steps", source)

    devices = data.get("devices")
    if devices is not None:
        _require_list(devices, f"{context}.devices", source)
        devices = [str(d) for d in devices]

    return Scenario(
        id=_text(data.get("id")),
        name=_text(data.get("name")),
        triggers=[
            _parse_trigger(t, f"{context}.triggers[{j}]", source)
            for j, t in enumerate(triggers_data)
        ],
        steps=[
            _parse_step(st, f"{context}.steps[{k}]", source)
            for k, st in enumerate(steps_data)
        ],
        icon=data.get("icon"),
        devices=devices,
        extra={k: v for k, v in data.items() if k not in SCENARIO_FIELDS},
    )


def _parse_trigger(data: Any, context: str, source: str) -> Trigger:
    if not is_mapping(data) or not is_mapping(data.get("trigger")):
        raise ValueError(f"{context} must contain a 'trigger' mapping in {source}")
    body = data["trigger"]
    _require_fields(body, ["type"], f"{context}.trigger", source)
    return Trigger(type=_text(body["type"]), value=body.get("value"))


def _parse_step(data: Any, context: str, source: str) -> Step:
    if not is_mapping(data):
        raise ValueError(f"{context} must be a mapping in {source}")
    _require_fields(data, ["type"], context, source)

    parameters = data.get("parameters") or {}
    if not is_mapping(parameters):
        raise ValueError(f"{context}.parameters must be a mapping in {source}")
    items_data = parameters.get("items") or []
    _require_list(items_data, f"{context}.parameters.items", source)

    items = []
    for n, item in enumerate(items_data):
        item_context = f"{context}.parameters.items[{n}]"
        if not is_mapping(item):
            raise ValueError(f"{item_context} must be a mapping in {source}")
        _require_fields(item, ["id", "type"], item_context, source)
        items.append(Item(id=_text(item["id"]), type=_text(item["type"])))

    return Step(type=_text(data["type"]), items=items)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _require_list(value: Any, context: str, source: str) -> None:
    if not is_sequence(value):
        raise ValueError(f"'{context}' must be a list in {source}")


def _require_fields(
    data: dict, fields: list[str], context: str, source: str
) -> None:
    """Check that required fields exist in a dictionary."""
    for field_name in fields:
        if field_name not in data:
            raise ValueError(
                f"Missing required field '{field_name}' in {context} ({source})"
            )
