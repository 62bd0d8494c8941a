"""Filesystem metadata subpackage.

Read-only access to path existence and modification times, behind an ABC so
tests can substitute an in-memory fake.
"""

from update_watchdog.core.filesystem.abc import Filesystem
from update_watchdog.core.filesystem.real import RealFilesystem

__all__ = [
    "Filesystem",
    "RealFilesystem",
]
