"""Status of the local GeoLite2 database files.

Downloading and unpacking the databases is left to MaxMind's own tooling
(``geoipupdate``); this module only reports what is on disk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional

from .providers.local import ASN_DB_FILENAME, CITY_DB_FILENAME

logger = logging.getLogger(__name__)

EDITIONS = (
    ("GeoLite2-City", CITY_DB_FILENAME),
    ("GeoLite2-ASN", ASN_DB_FILENAME),
)


@dataclass(slots=True, frozen=True)
class DatabaseStatus:
    """Presence, size and modification time of one database file."""

    edition: str
    path: Path
    exists: bool
    size: Optional[int] = None
    modified_at: Optional[datetime] = None


def get_db_status(data_dir: Path) -> List[DatabaseStatus]:
    """Report the City and ASN database files in ``data_dir``."""
    data_dir = Path(data_dir).expanduser()
    statuses: List[DatabaseStatus] = []
    for edition, filename in EDITIONS:
        path = data_dir / filename
        try:
            stat = path.stat()
        except FileNotFoundError:
            statuses.append(DatabaseStatus(edition=edition, path=path, exists=False))
            continue
        statuses.append(
            DatabaseStatus(
                edition=edition,
                path=path,
                exists=True,
                size=stat.st_size,
                modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            )
        )
    return statuses


def format_db_status(statuses: List[DatabaseStatus], data_dir: Path) -> str:
    """Render a status report, one line per edition plus the directory."""
    lines = ["GeoLite2 Database Status:", ""]
    for status in statuses:
        if status.exists:
            size = f"{status.size / 1024 / 1024:.1f} MB" if status.size else "unknown"
            modified = status.modified_at.date().isoformat() if status.modified_at else "unknown"
            lines.append(f"✓ {status.edition}: {size} ({modified})")
        else:
            lines.append(f"✗ {status.edition}: not installed")
    lines.append("")
    lines.append(f"Location: {Path(data_dir).expanduser()}")
    return "\n".join(lines)


def get_database_age(data_dir: Path, now: Optional[datetime] = None) -> timedelta:
    """Age of the oldest installed database file.

    Args:
        data_dir: Directory containing the GeoLite2 files
        now: Reference time (default: current UTC time)

    Returns:
        Time elapsed since the oldest file was last modified

    Raises:
        FileNotFoundError: If neither database file exists
    """
    installed = [status.modified_at for status in get_db_status(data_dir) if status.modified_at is not None]
    if not installed:
        raise FileNotFoundError(f"No GeoLite2 database files in {Path(data_dir).expanduser()}")

    now = now or datetime.now(timezone.utc)
    age = now - min(installed)
    logger.debug(f"GeoLite2 database age: {age}")
    return age


__all__ = ["DatabaseStatus", "format_db_status", "get_database_age", "get_db_status"]
