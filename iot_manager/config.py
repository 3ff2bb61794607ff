"""Configuration for the scenario manager."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .vault.versions import DEFAULT_VERSIONS_FOLDER

ENV_VAULT = "IOT_MANAGER_VAULT"
ENV_VERSIONS_FOLDER = "IOT_MANAGER_VERSIONS_FOLDER"
ENV_LOG_LEVEL = "IOT_MANAGER_LOG_LEVEL"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class ManagerConfig:
    """Configuration for scenario management commands."""
    vault_root: Path = Path(".")
    versions_folder: str = DEFAULT_VERSIONS_FOLDER
    log_level: str = "WARNING"

    def __post_init__(self):
        self.vault_root = Path(self.vault_root)
        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{self.log_level}'. "
                f"Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}"
            )


def load_config(environ: Optional[Mapping[str, str]] = None) -> ManagerConfig:
    """Load configuration from environment variables.

    Reads IOT_MANAGER_VAULT, IOT_MANAGER_VERSIONS_FOLDER and
    IOT_MANAGER_LOG_LEVEL. Unset or blank variables keep their defaults.

    Raises:
        ValueError: If the log level is not a known level name.
    """
    if environ is None:
        environ = os.environ

    values = {}
    vault = environ.get(ENV_VAULT, "").strip()
    if vault:
        values["vault_root"] = Path(vault)
    folder = environ.get(ENV_VERSIONS_FOLDER, "").strip()
    if folder:
        values["versions_folder"] = folder
    level = environ.get(ENV_LOG_LEVEL, "").strip()
    if level:
        values["log_level"] = level

    return ManagerConfig(**values)
