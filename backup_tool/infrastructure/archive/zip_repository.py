"""ZIP-file repository that streams backed-up files into a single archive."""
from __future__ import annotations

import logging
import os
import zipfile
from pathlib import Path
from typing import BinaryIO, Sequence

from backup_tool.config import SETTINGS
from backup_tool.domain.errors import ArchiveCreateError, ArchiveFinalizeError
from backup_tool.domain.models import ArchiveEntry, BackupIssue
from backup_tool.domain.results import ArchiveReceipt

logger = logging.getLogger(__name__)


class ZipArchiveRepository:
    def __init__(
        self,
        root: Path,
        chunk_size: int | None = None,
        compression: int | None = None,
    ) -> None:
        self._root = Path(root)
        self._chunk_size = chunk_size or SETTINGS.chunk_size
        self._compression = SETTINGS.compression if compression is None else compression

    def save_archive(self, name: str, entries: Sequence[ArchiveEntry]) -> ArchiveReceipt:
        target = self._root / name
        if target.exists():
            logger.warning("Overwriting existing archive %s", target)
        try:
            archive = self._open_archive(target)
        except OSError as exc:
            raise ArchiveCreateError(target, str(exc)) from exc

        written: list[ArchiveEntry] = []
        issues: list[BackupIssue] = []
        try:
            for entry in entries:
                if self._is_target(entry.source, target):
                    issues.append(
                        self._issue(entry, "archive_self", f"Skipping {entry.source}: it is the archive being written")
                    )
                    continue
                if self._copy_entry(archive, entry, issues):
                    written.append(entry)
        finally:
            self._finalize(archive, target)

        return ArchiveReceipt(location=target, entries=tuple(written), issues=tuple(issues))

    def _open_archive(self, target: Path) -> zipfile.ZipFile:
        return zipfile.ZipFile(target, mode="w", compression=self._compression)

    def _open_source(self, path: Path) -> BinaryIO:
        return path.open("rb")

    def _copy_entry(self, archive: zipfile.ZipFile, entry: ArchiveEntry, issues: list[BackupIssue]) -> bool:
        """Stream one file into *archive*; returns False when no entry was created."""

        try:
            source = self._open_source(entry.source)
        except OSError:
            issues.append(self._issue(entry, "unreadable_file", f"Unable to open file {entry.source}"))
            return False

        with source:
            force_zip64 = False
            try:
                info = zipfile.ZipInfo.from_file(entry.source, arcname=entry.name, strict_timestamps=False)
            except OSError:
                # size unknown up front
                info = zipfile.ZipInfo(entry.name)
                force_zip64 = True
            info.compress_type = self._compression

            with archive.open(info, mode="w", force_zip64=force_zip64) as sink:
                while True:
                    try:
                        chunk = source.read(self._chunk_size)
                    except OSError:
                        issues.append(
                            self._issue(entry, "read_error", f"Error occurred while reading file {entry.source}")
                        )
                        break
                    if not chunk:
                        break
                    try:
                        sink.write(chunk)
                    except OSError:
                        issues.append(
                            self._issue(entry, "write_error", f"Error occurred while writing {entry.name} to zip file")
                        )
                        break
        return True

    @staticmethod
    def _finalize(archive: zipfile.ZipFile, target: Path) -> None:
        try:
            archive.close()
        except OSError as exc:
            raise ArchiveFinalizeError(target, str(exc)) from exc

    @staticmethod
    def _is_target(source: Path, target: Path) -> bool:
        try:
            return os.path.samefile(source, target)
        except OSError:
            return False

    @staticmethod
    def _issue(entry: ArchiveEntry, issue_type: str, message: str) -> BackupIssue:
        logger.warning(message)
        return BackupIssue(path=entry.source, issue_type=issue_type, message=message)
