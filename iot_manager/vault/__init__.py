"""Vault module - note storage and snapshots."""

from .notes import extract_yaml_block, render_note
from .store import FileVault
from .versions import (
    list_versions,
    render_versions_note,
    snapshot_name,
    snapshot_timestamp,
)

__all__ = [
    "extract_yaml_block",
    "render_note",
    "FileVault",
    "list_versions",
    "render_versions_note",
    "snapshot_name",
    "snapshot_timestamp",
]
