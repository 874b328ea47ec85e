"""Domain-level results for a backup run."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, Sequence

from .models import ArchiveEntry, BackupIssue


@dataclass(frozen=True)
class CrawlResult:
    files: Sequence[Path] = field(default_factory=tuple)
    issues: Sequence[BackupIssue] = field(default_factory=tuple)


@dataclass(frozen=True)
class ArchiveReceipt:
    location: Path
    entries: Sequence[ArchiveEntry] = field(default_factory=tuple)
    issues: Sequence[BackupIssue] = field(default_factory=tuple)


@dataclass(frozen=True)
class BackupSummary:
    total_inputs: int
    discovered: int
    archived: int
    warnings: int
    generated_at: datetime


@dataclass(frozen=True)
class BackupReport:
    summary: BackupSummary
    location: Path
    entries: Sequence[ArchiveEntry] = field(default_factory=tuple)
    crawl_issues: Sequence[BackupIssue] = field(default_factory=tuple)
    resolve_issues: Sequence[BackupIssue] = field(default_factory=tuple)
    archive_issues: Sequence[BackupIssue] = field(default_factory=tuple)

    def has_issues(self) -> bool:
        return self.summary.warnings > 0

    def iter_all_issues(self) -> Iterable[BackupIssue]:
        yield from self.crawl_issues
        yield from self.resolve_issues
        yield from self.archive_issues
