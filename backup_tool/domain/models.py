"""Domain models for the backup pipeline.

These dataclasses describe what a run reads, what it discovers and what it
writes into the archive.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BackupConfig:
    """Inputs to crawl and the directory that receives the archive."""

    input_paths: tuple[Path, ...]
    output_path: Path


@dataclass(frozen=True)
class ArchiveEntry:
    """A source file paired with the name it is stored under in the archive."""

    source: Path
    name: str


@dataclass(frozen=True)
class BackupIssue:
    """A non-fatal problem; the affected item is skipped and the run goes on."""

    path: Path
    issue_type: str
    message: str
