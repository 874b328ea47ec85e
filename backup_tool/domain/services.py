"""Domain services: discovering files and naming their archive entries."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

from .models import ArchiveEntry, BackupIssue
from .results import CrawlResult

logger = logging.getLogger(__name__)


def _issue(path: Path, issue_type: str, message: str) -> BackupIssue:
    logger.warning(message)
    return BackupIssue(path=path, issue_type=issue_type, message=message)


class Crawler:
    """Collects every regular file reachable from the configured input paths.

    Traversal is depth first with an explicit stack. Unreadable directories,
    missing paths and special files are reported as issues and skipped.
    """

    def crawl_all(self, roots: Sequence[Path]) -> CrawlResult:
        files: list[Path] = []
        issues: list[BackupIssue] = []
        for root in roots:
            result = self.crawl(root)
            files.extend(result.files)
            issues.extend(result.issues)
        return CrawlResult(files=tuple(files), issues=tuple(issues))

    def crawl(self, root: Path) -> CrawlResult:
        files: list[Path] = []
        issues: list[BackupIssue] = []
        visited: set[str] = set()
        stack = [Path(root)]

        while stack:
            path = stack.pop()
            if path.is_file():
                files.append(path)
                continue
            if path.is_dir():
                children = self._list_directory(path, visited, issues)
                # reversed so the stack pops siblings in enumeration order
                stack.extend(reversed(children))
                continue
            if not os.path.lexists(path):
                issues.append(_issue(path, "missing_input", f"Skipping {path}: path does not exist"))
            else:
                issues.append(
                    _issue(path, "unsupported_path", f"Skipping {path}: not a regular file or directory")
                )

        return CrawlResult(files=tuple(files), issues=tuple(issues))

    @staticmethod
    def _list_directory(path: Path, visited: set[str], issues: list[BackupIssue]) -> list[Path]:
        key = os.path.realpath(path)
        if key in visited:
            issues.append(
                _issue(path, "revisited_directory", f"Skipping directory {path}: already crawled as {key}")
            )
            return []
        visited.add(key)
        try:
            with os.scandir(path) as entries:
                return [Path(entry.path) for entry in entries]
        except OSError:
            issues.append(_issue(path, "unreadable_directory", f"Unable to read directory {path}"))
            return []


class PathResolver:
    """Turns discovered paths into archive entry names."""

    @staticmethod
    def entry_name(path: Path) -> str | None:
        """Return the canonical absolute path of *path* without its leading separator.

        ``None`` when the path cannot be canonicalized, is not valid UTF-8 text,
        or has no leading separator to strip.
        """

        try:
            text = str(Path(path).resolve(strict=True))
            text.encode("utf-8")
        except (OSError, RuntimeError, UnicodeEncodeError):
            return None
        if not text.startswith(os.sep):
            return None
        return text[len(os.sep):]

    def resolve_all(self, files: Sequence[Path]) -> tuple[tuple[ArchiveEntry, ...], tuple[BackupIssue, ...]]:
        entries: list[ArchiveEntry] = []
        issues: list[BackupIssue] = []
        seen: set[str] = set()

        for path in files:
            name = self.entry_name(path)
            if name is None:
                issues.append(_issue(path, "unresolvable_path", f"Unable to extract absolute path of {path}"))
                continue
            if name in seen:
                issues.append(_issue(path, "duplicate_entry", f"Skipping {path}: entry {name} already added"))
                continue
            seen.add(name)
            entries.append(ArchiveEntry(source=Path(path), name=name))

        return tuple(entries), tuple(issues)
