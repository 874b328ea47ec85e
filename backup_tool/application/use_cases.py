"""Application services orchestrating the backup workflow."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable

from backup_tool.application.dto import BackupRequest, BackupResponse
from backup_tool.domain.naming import archive_name
from backup_tool.domain.repositories import ArchiveRepository, ConfigRepository
from backup_tool.domain.results import BackupReport, BackupSummary
from backup_tool.domain.services import Crawler, PathResolver
from backup_tool.infrastructure.archive.zip_repository import ZipArchiveRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BackupContext:
    config_repository: ConfigRepository
    crawler: Crawler = field(default_factory=Crawler)
    resolver: PathResolver = field(default_factory=PathResolver)
    archive_repository_factory: Callable[[Path], ArchiveRepository] = ZipArchiveRepository


class RunBackupUseCase:
    def __init__(self, context: BackupContext) -> None:
        self._context = context

    def execute(self, request: BackupRequest | None = None) -> BackupResponse:
        request = request or BackupRequest()
        config = self._context.config_repository.load_config()

        crawl = self._context.crawler.crawl_all(config.input_paths)
        logger.info("Discovered %d file(s) under %d input path(s)", len(crawl.files), len(config.input_paths))
        entries, resolve_issues = self._context.resolver.resolve_all(crawl.files)

        repository = self._context.archive_repository_factory(config.output_path)
        receipt = repository.save_archive(archive_name(request.requested_at), entries)

        warnings = len(crawl.issues) + len(resolve_issues) + len(receipt.issues)
        summary = BackupSummary(
            total_inputs=len(config.input_paths),
            discovered=len(crawl.files),
            archived=len(receipt.entries),
            warnings=warnings,
            generated_at=datetime.now(),
        )
        report = BackupReport(
            summary=summary,
            location=receipt.location,
            entries=tuple(receipt.entries),
            crawl_issues=tuple(crawl.issues),
            resolve_issues=tuple(resolve_issues),
            archive_issues=tuple(receipt.issues),
        )
        return BackupResponse(config=config, report=report, receipt=receipt)
