"""Production filesystem implementation backed by os.stat()."""

import os
from datetime import datetime
from pathlib import Path

from update_watchdog.core.filesystem.abc import Filesystem


class RealFilesystem(Filesystem):
    """Queries the real filesystem. Never writes."""

    def exists(self, path: Path) -> bool:
        # os.path.exists is False for any stat() failure, EACCES on a parent included
        return os.path.exists(path)

    def modified_at(self, path: Path) -> datetime:
        # Let OSError bubble; the inspector decides what a failure means
        return datetime.fromtimestamp(path.stat().st_mtime).astimezone()
