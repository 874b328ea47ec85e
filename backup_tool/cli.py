"""Command-line entrypoint for running a backup."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from backup_tool.application.use_cases import BackupContext, RunBackupUseCase
from backup_tool.config import CONFIG_FORMAT, USAGE
from backup_tool.domain.errors import BackupError
from backup_tool.infrastructure.storage.config_store import JsonConfigRepository


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Archive configured files and directories into a timestamped zip")
    parser.add_argument("config", type=str, nargs="?", help="Path to the JSON configuration file")
    return parser.parse_args(argv)


def configure_logging() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s", stream=sys.stdout)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    if args.config is None:
        print(USAGE)
        print(CONFIG_FORMAT)
        return 1

    configure_logging()
    print(f"Loading config: {args.config}")
    use_case = RunBackupUseCase(BackupContext(config_repository=JsonConfigRepository(Path(args.config))))
    try:
        response = use_case.execute()
    except BackupError as exc:
        print(f"ERROR: {exc}")
        return 1

    summary = response.report.summary
    print("Backup Summary")
    print("==============")
    print(f"Input paths: {summary.total_inputs}")
    print(f"Files discovered: {summary.discovered}")
    print(f"Entries archived: {summary.archived}")
    print(f"Warnings: {summary.warnings}")
    print(f"Backup generated: {response.report.location}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
