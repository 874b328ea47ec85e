"""Central configuration for the backup tool."""
from __future__ import annotations

import zipfile
from dataclasses import dataclass

USAGE = "Usage: backup-tool CONFIG_PATH"
CONFIG_FORMAT = (
    'Config format: {"input_paths": ["FILE TO BACKUP", "DIRECTORY TO BACKUP"], '
    '"output_path": "OUTPUT DIRECTORY"}'
)


@dataclass(slots=True, frozen=True)
class Settings:
    chunk_size: int
    archive_prefix: str
    compression: int


SETTINGS = Settings(
    chunk_size=8196,
    archive_prefix="backup",
    compression=zipfile.ZIP_DEFLATED,
)
