"""Flat text document store backed by a directory.

Documents are addressed by vault-relative paths using ``/`` separators,
e.g. ``versions/Lights_20260101120000.md``.
"""

import logging
from pathlib import Path, PurePosixPath
from typing import Union

logger = logging.getLogger(__name__)


class FileVault:
    """Reads and writes text documents under a root directory."""

    def __init__(self, root: Union[str, Path]):
        """Initialize the vault.

        Args:
            root: Directory holding the documents. Created on first write.
        """
        self.root = Path(root).resolve()

    def resolve(self, name: str) -> Path:
        """Map a vault-relative name to a filesystem path.

        Raises:
            ValueError: If the name is absolute or escapes the vault root.
        """
        relative = PurePosixPath(name)
        if relative.is_absolute() or ".." in relative.parts:
            raise ValueError(f"Document path must stay inside the vault: {name}")
        return self.root.joinpath(*relative.parts)

    def exists(self, name: str) -> bool:
        return self.resolve(name).exists()

    def is_folder(self, name: str) -> bool:
        return self.resolve(name).is_dir()

    def read_text(self, name: str) -> str:
        """Read a document.

        Raises:
            FileNotFoundError: If the document doesn't exist.
        """
        path = self.resolve(name)
        if not path.is_file():
            raise FileNotFoundError(f"Document not found: {name}")
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def write_text(self, name: str, text: str) -> str:
        """Write a document, replacing any existing content.

        Returns:
            The document name.
        """
        path = self.resolve(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.debug("Wrote %s (%d chars)", name, len(text))
        return name

    def create(self, name: str, text: str) -> str:
        """Create a new document.

        Raises:
            FileExistsError: If the document already exists.
        """
        if self.exists(name):
            raise FileExistsError(f"Document already exists: {name}")
        return self.write_text(name, text)

    def ensure_folder(self, name: str) -> None:
        self.resolve(name).mkdir(parents=True, exist_ok=True)

    def list_documents(
        self,
        folder: str,
        prefix: str = "",
        extension: str = "",
    ) -> list[str]:
        """List document file names in a folder.

        Args:
            folder: Vault-relative folder name.
            prefix: Only names starting with this prefix.
            extension: Only names ending with this suffix (e.g. ".md").

        Returns:
            Sorted file names (not paths). Empty if the folder is missing.
        """
        path = self.resolve(folder)
        if not path.is_dir():
            return []
        return sorted(
            entry.name
            for entry in path.iterdir()
            if entry.is_file()
            and entry.name.startswith(prefix)
            and entry.name.endswith(extension)
        )
