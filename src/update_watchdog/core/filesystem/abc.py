"""Filesystem metadata interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path


class Filesystem(ABC):
    """Abstract interface for the filesystem queries the inspector needs.

    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check whether path exists."""
        ...

    @abstractmethod
    def modified_at(self, path: Path) -> datetime:
        """Return the last-modification time of path in local time.

        Raises:
            OSError: If the attributes of path cannot be read
        """
        ...
