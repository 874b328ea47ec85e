"""Archive file naming."""
from __future__ import annotations

from datetime import datetime

from backup_tool.config import SETTINGS


def archive_name(moment: datetime | None = None, prefix: str | None = None) -> str:
    """Return ``<prefix>_<year>_<month>_<day> <hour>-<minute>.zip`` for *moment*.

    Uses local wall-clock time when *moment* is omitted. Fields are not zero
    padded and the resolution is one minute, so two runs in the same minute
    produce the same name.
    """

    now = moment or datetime.now()
    prefix = prefix or SETTINGS.archive_prefix
    return f"{prefix}_{now.year}_{now.month}_{now.day} {now.hour}-{now.minute}.zip"
