"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Protocol, Sequence

from .models import ArchiveEntry, BackupConfig
from .results import ArchiveReceipt


class ConfigRepository(Protocol):
    """Provides the configuration for a run."""

    def load_config(self) -> BackupConfig:
        ...


class ArchiveRepository(Protocol):
    """Writes resolved entries into a named archive."""

    def save_archive(self, name: str, entries: Sequence[ArchiveEntry]) -> ArchiveReceipt:
        ...
