"""Report generators for backup runs."""
from __future__ import annotations

import csv
import html
import io
from typing import Mapping, Sequence

from backup_tool.domain.models import ArchiveEntry, BackupIssue
from backup_tool.domain.results import BackupReport

ENTRY_FIELDS = ("entry", "source")
ISSUE_FIELDS = ("path", "issue_type", "message")


def entries_to_rows(entries: Sequence[ArchiveEntry]) -> list[dict[str, str]]:
    return [{"entry": entry.name, "source": str(entry.source)} for entry in entries]


def issues_to_rows(issues: Sequence[BackupIssue]) -> list[dict[str, str]]:
    return [
        {"path": str(item.path), "issue_type": item.issue_type, "message": item.message}
        for item in issues
    ]


def summary_to_row(report: BackupReport) -> dict[str, str]:
    summary = report.summary
    return {
        "archive": str(report.location),
        "generated_at": summary.generated_at.isoformat(timespec="seconds"),
        "input_paths": str(summary.total_inputs),
        "discovered": str(summary.discovered),
        "archived": str(summary.archived),
        "warnings": str(summary.warnings),
    }


def render_csv(issues: Sequence[BackupIssue]) -> bytes:
    """Warnings as CSV; the header is written even when the run was clean."""

    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=ISSUE_FIELDS)
    writer.writeheader()
    writer.writerows(issues_to_rows(issues))
    return buffer.getvalue().encode("utf-8")


def _table(rows: Sequence[Mapping[str, str]], fields: Sequence[str]) -> str:
    header = "".join(f"<th>{field}</th>" for field in fields)
    body = "".join(
        "<tr>" + "".join(f"<td>{html.escape(row[field])}</td>" for field in fields) + "</tr>"
        for row in rows
    )
    return f"<table><thead><tr>{header}</tr></thead><tbody>{body}</tbody></table>"


def render_html(report: BackupReport) -> str:
    summary = summary_to_row(report)
    items = "".join(f"<li>{key}: {html.escape(value)}</li>" for key, value in summary.items())
    parts = [f"<h2>Backup summary</h2><ul>{items}</ul>", "<h3>Entries</h3>"]

    entries = entries_to_rows(report.entries)
    parts.append(_table(entries, ENTRY_FIELDS) if entries else "<p>No entries archived.</p>")

    parts.append("<h3>Warnings</h3>")
    issues = issues_to_rows(tuple(report.iter_all_issues()))
    parts.append(_table(issues, ISSUE_FIELDS) if issues else "<p>No warnings.</p>")
    return "".join(parts)
