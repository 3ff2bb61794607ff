"""Snapshot naming and listing for scenario notes."""

from datetime import datetime, timezone
from typing import Optional

from .notes import NOTE_EXTENSION
from .store import FileVault

DEFAULT_VERSIONS_FOLDER = "versions"


def snapshot_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a moment as YYYYMMDDHHMMSS in UTC."""
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y%m%d%H%M%S")


def snapshot_name(basename: str, moment: Optional[datetime] = None) -> str:
    """Name of a snapshot of ``basename`` taken at ``moment`` (default now)."""
    return f"{basename}_{snapshot_timestamp(moment)}"


def list_versions(
    vault: FileVault,
    basename: str,
    folder: str = DEFAULT_VERSIONS_FOLDER,
) -> list[str]:
    """File names of the snapshots of a note, sorted by name."""
    return vault.list_documents(folder, prefix=basename, extension=NOTE_EXTENSION)


def versions_note_name(basename: str) -> str:
    """File name of the note listing the snapshots of ``basename``."""
    return f"Versions_of_{basename}{NOTE_EXTENSION}"


def render_versions_note(
    basename: str,
    versions: list[str],
    folder: str = DEFAULT_VERSIONS_FOLDER,
) -> str:
    """Render a note linking every snapshot of ``basename``."""
    links = "\n".join(f"- [[{folder}/{v}]]" for v in versions)
    return f"# Versions of {basename}\n\n{links}"


def strip_extension(file_name: str) -> str:
    """Drop a trailing note extension, if present."""
    if file_name.endswith(NOTE_EXTENSION):
        return file_name[: -len(NOTE_EXTENSION)]
    return file_name
