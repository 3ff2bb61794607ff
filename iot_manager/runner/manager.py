"""Scenario manager - runs note commands against a vault.

Each command follows the same flow:
1. Resolve the note and read its YAML block
2. Decode, validate, diff or simulate with the scenario core
3. Write any resulting documents back to the vault
4. Return a CommandResult describing the outcome
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path, PurePosixPath
from typing import Any, Callable, Optional, Union

from ..config import ManagerConfig
from ..reporting.json_reporter import JsonReporter
from ..scenario.differ import diff_documents
from ..scenario.parser import (
    ScenarioParseError,
    dump_yaml,
    load_yaml,
    parse_document_data,
)
from ..scenario.schema import TriggerType
from ..scenario.simulator import simulate
from ..scenario.templates import build_template, now_ms, template_note_name
from ..scenario.validator import validate_document
from ..vault.notes import NOTE_EXTENSION, extract_yaml_block, render_note
from ..vault.store import FileVault
from ..vault.versions import (
    list_versions,
    render_versions_note,
    snapshot_name,
    strip_extension,
    versions_note_name,
)

logger = logging.getLogger(__name__)

# Receives option labels, returns the index of the chosen one.
Chooser = Callable[[list[str]], int]

YAML_SUFFIXES = (".yaml", ".yml")


class CommandFailed(Exception):
    """A precondition of a command was not met."""


@dataclass
class CommandResult:
    """Outcome of a manager command."""
    command: str
    success: bool
    message: str
    data: dict[str, Any] = field(default_factory=dict)

    def to_flow_json(self) -> dict:
        """Convert to flow CLI compatible JSON output."""
        return JsonReporter().generate_flow_output(
            command=self.command,
            success=self.success,
            message=self.message,
            data=self.data,
        )


@dataclass
class _Note:
    name: str
    basename: str
    yaml_text: str


class ScenarioManager:
    """Runs scenario note commands against a vault."""

    def __init__(
        self,
        vault: Optional[FileVault] = None,
        config: Optional[ManagerConfig] = None,
    ):
        """Initialize the manager.

        Args:
            vault: Document store. Defaults to a vault at config.vault_root.
            config: Manager configuration.
        """
        self.config = config or ManagerConfig()
        self.vault = vault or FileVault(self.config.vault_root)

    @property
    def versions_folder(self) -> str:
        return self.config.versions_folder

    def import_yaml(self, source: Union[str, Path]) -> CommandResult:
        """Import a YAML file as a new note named after the file."""
        source = Path(source)
        try:
            if not source.is_file():
                raise CommandFailed(f"File not found: {source}")
            if source.suffix not in YAML_SUFFIXES:
                raise CommandFailed(f"Expected .yaml or .yml file, got: {source.suffix}")

            with open(source, "r", encoding="utf-8") as f:
                text = f.read()

            note_name = self._create(f"{source.stem}{NOTE_EXTENSION}", render_note(source.stem, text))
        except CommandFailed as e:
            return self._failed("import", str(e))

        return CommandResult(
            command="import",
            success=True,
            message=f"Imported {source.stem} successfully!",
            data={"note": note_name},
        )

    def export_yaml(self, note: str, dest_dir: Union[str, Path] = ".") -> CommandResult:
        """Write a note's YAML block to ``{dest_dir}/{basename}.yaml``."""
        try:
            current = self._open_note(note)
        except CommandFailed as e:
            return self._failed("export", str(e))

        dest = Path(dest_dir) / f"{current.basename}.yaml"
        dest.parent.mkdir(parents=True, exist_ok=True)
        with open(dest, "w", encoding="utf-8") as f:
            f.write(current.yaml_text)
        logger.info("Exported %s to %s", current.name, dest)

        return CommandResult(
            command="export",
            success=True,
            message=f"Exported {current.basename}.yaml successfully!",
            data={"path": str(dest)},
        )

    def create_version(
        self,
        note: str,
        moment: Optional[datetime] = None,
    ) -> CommandResult:
        """Store a timestamped snapshot of a note's YAML block."""
        try:
            current = self._open_note(note)
            self.vault.ensure_folder(self.versions_folder)
            name = snapshot_name(current.basename, moment)
            path = self._create(
                f"{self.versions_folder}/{name}{NOTE_EXTENSION}",
                render_note(name, current.yaml_text),
            )
        except CommandFailed as e:
            return self._failed("version", str(e))

        return CommandResult(
            command="version",
            success=True,
            message=f"Created versioned copy: {name}",
            data={"version": name, "path": path},
        )

    def show_versions(self, note: str) -> CommandResult:
        """Write or refresh the note listing every snapshot of ``note``."""
        try:
            basename = self._note_basename(note)
            versions = self._versions(basename)
        except CommandFailed as e:
            return self._failed("versions", str(e))

        list_name = versions_note_name(basename)
        existed = self.vault.exists(list_name)
        self.vault.write_text(
            list_name,
            render_versions_note(basename, versions, self.versions_folder),
        )
        logger.info("Wrote versions list %s (%d versions)", list_name, len(versions))

        action = "Updated" if existed else "Created"
        return CommandResult(
            command="versions",
            success=True,
            message=f"{action} versions list for {basename}",
            data={"note": list_name, "versions": versions},
        )

    def validate(self, note: str) -> CommandResult:
        """Validate the structure of a note's YAML block."""
        try:
            current = self._open_note(note)
            data = self._load(current.yaml_text)
        except CommandFailed as e:
            return self._failed("validate", str(e))

        result = validate_document(data)
        if not result.valid:
            logger.warning("%s failed validation with %d errors", current.name, result.error_count)
            return CommandResult(
                command="validate",
                success=False,
                message="YAML validation failed:\n" + "\n".join(result.messages),
                data={"errors": result.messages},
            )

        return CommandResult(command="validate", success=True, message="YAML is valid!")

    def generate_template(
        self,
        chooser: Chooser,
        timestamp_ms: Optional[int] = None,
    ) -> CommandResult:
        """Create a template note for a trigger kind picked by ``chooser``.

        Raises:
            IndexError: If the chooser returns an index out of range.
        """
        trigger_types = list(TriggerType)
        choice = chooser([t.label for t in trigger_types])
        trigger_type = trigger_types[_check_choice(choice, trigger_types)]

        if timestamp_ms is None:
            timestamp_ms = now_ms()
        document = build_template(trigger_type, timestamp_ms)
        name = template_note_name(trigger_type, timestamp_ms)

        try:
            path = self._create(f"{name}{NOTE_EXTENSION}", render_note(name, dump_yaml(document.to_dict())))
        except CommandFailed as e:
            return self._failed("template", str(e))

        return CommandResult(
            command="template",
            success=True,
            message=f"Created template: {name}",
            data={"note": path},
        )

    def compare_versions(self, note: str, chooser: Chooser) -> CommandResult:
        """Diff a note against one of its snapshots picked by ``chooser``.

        The diff is written to ``Diff_{basename}_{snapshot}.md``.

        Raises:
            IndexError: If the chooser returns an index out of range.
        """
        try:
            basename = self._note_basename(note)
            versions = self._versions(basename)
        except CommandFailed as e:
            return self._failed("compare", str(e))

        version_file = versions[_check_choice(chooser(versions), versions)]
        version_basename = strip_extension(version_file)

        current_text = extract_yaml_block(self.vault.read_text(note)) or ""
        version_text = extract_yaml_block(
            self.vault.read_text(f"{self.versions_folder}/{version_file}")
        ) or ""

        try:
            current = self._load(current_text)
            previous = self._load(version_text)
        except CommandFailed as e:
            return self._failed("compare", str(e))

        lines = diff_documents(current, previous)
        diff_name = f"Diff_{basename}_{version_basename}"
        self.vault.write_text(
            f"{diff_name}{NOTE_EXTENSION}",
            f"# Diff with {version_basename}\n\n" + "\n".join(lines),
        )
        logger.info("Compared %s with %s", note, version_file)

        return CommandResult(
            command="compare",
            success=True,
            message=f"Comparison created: {diff_name}",
            data={"note": f"{diff_name}{NOTE_EXTENSION}", "changes": lines},
        )

    def simulate(self, note: str) -> CommandResult:
        """Produce a textual execution trace of a note's scenarios."""
        try:
            current = self._open_note(note)
            data = self._load(current.yaml_text)
            try:
                document = parse_document_data(data, source=current.name)
            except ValueError as e:
                raise CommandFailed(f"Invalid scenario: {e}") from e
        except CommandFailed as e:
            return self._failed("simulate", str(e))

        if not document.scenarios:
            return self._failed("simulate", "No scenarios to simulate.")

        trace = simulate(document)
        return CommandResult(
            command="simulate",
            success=True,
            message="Simulation:\n" + "\n".join(trace),
            data={"trace": trace},
        )

    def _note_basename(self, note: str) -> str:
        if not note.endswith(NOTE_EXTENSION) or not self.vault.exists(note):
            raise CommandFailed("Please open a Markdown file first.")
        return PurePosixPath(note).stem

    def _open_note(self, note: str) -> _Note:
        basename = self._note_basename(note)
        yaml_text = extract_yaml_block(self.vault.read_text(note))
        if yaml_text is None:
            raise CommandFailed("No YAML content found.")
        return _Note(name=note, basename=basename, yaml_text=yaml_text)

    def _versions(self, basename: str) -> list[str]:
        if not self.vault.is_folder(self.versions_folder):
            raise CommandFailed("No versions folder found.")
        versions = list_versions(self.vault, basename, self.versions_folder)
        if not versions:
            raise CommandFailed(f"No versions found for {basename}.")
        return versions

    def _load(self, text: str) -> Any:
        try:
            return load_yaml(text)
        except ScenarioParseError as e:
            raise CommandFailed(f"YAML parsing error: {e.message}") from e

    def _create(self, name: str, text: str) -> str:
        try:
            path = self.vault.create(name, text)
        except FileExistsError as e:
            raise CommandFailed(str(e)) from e
        logger.info("Created %s", path)
        return path

    def _failed(self, command: str, message: str) -> CommandResult:
        logger.warning("%s: %s", command, message)
        return CommandResult(command=command, success=False, message=message)


def _check_choice(index: int, options: list) -> int:
    if not 0 <= index < len(options):
        raise IndexError(f"Choice {index} out of range for {len(options)} options")
    return index
