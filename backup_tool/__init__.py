"""Configuration-driven backup into timestamped zip archives."""
from backup_tool.application.use_cases import BackupContext, RunBackupUseCase
from backup_tool.domain.services import Crawler, PathResolver
from backup_tool.infrastructure.archive.zip_repository import ZipArchiveRepository
from backup_tool.infrastructure.storage.config_store import JsonConfigRepository

__all__ = [
    "BackupContext",
    "RunBackupUseCase",
    "Crawler",
    "PathResolver",
    "ZipArchiveRepository",
    "JsonConfigRepository",
]
