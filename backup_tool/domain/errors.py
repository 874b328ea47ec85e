"""Fatal errors that stop a backup run."""
from __future__ import annotations

from pathlib import Path


class BackupError(Exception):
    """Base class for run-aborting failures."""

    headline = "Backup failed."

    def __init__(self, path: Path, detail: str) -> None:
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"{self.headline}\n{detail}")


class ConfigLoadError(BackupError):
    headline = "Config loading failed."


class ConfigParseError(BackupError):
    headline = "Config parsing failed."


class ArchiveCreateError(BackupError):
    headline = "Archive creation failed."


class ArchiveFinalizeError(BackupError):
    headline = "Archive finalization failed."
