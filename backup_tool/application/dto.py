"""Application-level DTOs for a backup run."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from backup_tool.domain.models import BackupConfig
from backup_tool.domain.results import ArchiveReceipt, BackupReport


@dataclass(slots=True, frozen=True)
class BackupRequest:
    requested_at: datetime = field(default_factory=datetime.now)


@dataclass(slots=True, frozen=True)
class BackupResponse:
    config: BackupConfig
    report: BackupReport
    receipt: ArchiveReceipt
