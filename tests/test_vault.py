"""Unit tests for notes, the file vault, versions and configuration."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from iot_manager.config import ManagerConfig, load_config
from iot_manager.vault.notes import extract_yaml_block, render_note
from iot_manager.vault.versions import (
    list_versions,
    render_versions_note,
    snapshot_name,
    snapshot_timestamp,
    strip_extension,
    versions_note_name,
)


class TestNotes:
    def test_render_and_extract(self) -> None:
        note = render_note("Lights", "scenarios: []")
        assert note == "# Lights\n```yaml\nscenarios: []\n```"
        assert extract_yaml_block(note) == "scenarios: []"

    def test_first_block_wins(self) -> None:
        content = "intro\n```yaml\na: 1\nb: 2\n```\ntext\n```yaml\nc: 3\n```"
        assert extract_yaml_block(content) == "a: 1\nb: 2"

    def test_no_block(self) -> None:
        assert extract_yaml_block("# Title\n```json\n{}\n```") is None


class TestFileVault:
    def test_write_and_read(self, vault) -> None:
        vault.write_text("folder/doc.md", "text")
        assert vault.exists("folder/doc.md")
        assert vault.is_folder("folder")
        assert vault.read_text("folder/doc.md") == "text"

    def test_create_refuses_existing(self, vault) -> None:
        vault.create("doc.md", "one")
        with pytest.raises(FileExistsError):
            vault.create("doc.md", "two")
        assert vault.read_text("doc.md") == "one"

    def test_read_missing(self, vault) -> None:
        with pytest.raises(FileNotFoundError):
            vault.read_text("missing.md")

    @pytest.mark.parametrize("name", ["../outside.md", "/etc/passwd", "a/../../b.md"])
    def test_paths_stay_inside(self, vault, name) -> None:
        with pytest.raises(ValueError):
            vault.resolve(name)

    def test_list_documents(self, vault) -> None:
        for name in ["b_2.md", "b_1.md", "a_1.md", "b_3.txt"]:
            vault.write_text(f"versions/{name}", "")
        vault.ensure_folder("versions/b_sub.md")

        assert vault.list_documents("versions", prefix="b", extension=".md") == ["b_1.md", "b_2.md"]
        assert vault.list_documents("missing") == []


class TestVersions:
    def test_timestamp_is_utc(self) -> None:
        moment = datetime(2024, 3, 9, 23, 5, 7, tzinfo=timezone(timedelta(hours=3)))
        assert snapshot_timestamp(moment) == "20240309200507"

    def test_naive_timestamp_kept(self) -> None:
        assert snapshot_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "20240102030405"

    def test_current_timestamp_shape(self) -> None:
        stamp = snapshot_timestamp()
        assert len(stamp) == 14 and stamp.isdigit()

    def test_snapshot_name(self) -> None:
        assert snapshot_name("Lights", datetime(2024, 1, 2, 3, 4, 5)) == "Lights_20240102030405"

    def test_list_versions_matches_prefix(self, vault) -> None:
        vault.write_text("versions/Lights_2.md", "")
        vault.write_text("versions/Lights_1.md", "")
        vault.write_text("versions/Heating_1.md", "")
        assert list_versions(vault, "Lights") == ["Lights_1.md", "Lights_2.md"]

    def test_versions_note(self) -> None:
        assert versions_note_name("Lights") == "Versions_of_Lights.md"
        assert render_versions_note("Lights", ["Lights_1.md", "Lights_2.md"]) == (
            "# Versions of Lights\n\n"
            "- [[versions/Lights_1.md]]\n"
            "- [[versions/Lights_2.md]]"
        )

    def test_strip_extension(self) -> None:
        assert strip_extension("Lights_1.md") == "Lights_1"
        assert strip_extension("Lights_1") == "Lights_1"


class TestConfig:
    def test_defaults(self) -> None:
        config = load_config({})
        assert config == ManagerConfig()
        assert config.vault_root == Path(".")
        assert config.versions_folder == "versions"
        assert config.log_level == "WARNING"

    def test_from_environment(self) -> None:
        config = load_config({
            "IOT_MANAGER_VAULT": "/tmp/vault",
            "IOT_MANAGER_VERSIONS_FOLDER": "snapshots",
            "IOT_MANAGER_LOG_LEVEL": "info",
        })
        assert config.vault_root == Path("/tmp/vault")
        assert config.versions_folder == "snapshots"
        assert config.log_level == "INFO"

    def test_blank_values_ignored(self) -> None:
        assert load_config({"IOT_MANAGER_VAULT": "  "}) == ManagerConfig()

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError):
            load_config({"IOT_MANAGER_LOG_LEVEL": "loud"})
