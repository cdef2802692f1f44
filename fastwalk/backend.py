"""
backend.py - directory enumeration and metadata capabilities

The walker only talks to the filesystem through a Backend, so tests (or
callers walking something other than the local disk) can substitute their
own implementation.
"""

import os
from abc import ABC, abstractmethod
from typing import NamedTuple, Optional

from .types import EntryType


class DirectoryRecord(NamedTuple):
    """One record read from a directory stream."""

    name: str
    inode: int
    type_hint: EntryType


class DirectoryHandle(ABC):
    """An open directory stream. Use as a context manager."""

    @abstractmethod
    def read(self) -> Optional[DirectoryRecord]:
        """
        Read the next record.

        Returns:
            The next DirectoryRecord, or None once the stream is exhausted

        Raises:
            OSError: if reading the stream fails
        """

    @abstractmethod
    def close(self) -> None:
        """Release the stream. Calling it twice is harmless."""

    def __enter__(self) -> "DirectoryHandle":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class Backend(ABC):
    """Capabilities the walker needs from a filesystem."""

    @abstractmethod
    def lstat(self, path: str) -> os.stat_result:
        """Stat ``path`` without following a terminal symlink."""

    @abstractmethod
    def opendir(self, path: str) -> DirectoryHandle:
        """Open ``path`` for enumeration; raises OSError on failure."""


class ScandirHandle(DirectoryHandle):
    """DirectoryHandle over an os.scandir() iterator."""

    def __init__(self, path: str):
        self._it = os.scandir(path)

    def read(self) -> Optional[DirectoryRecord]:
        try:
            entry = next(self._it)
        except StopIteration:
            return None
        return DirectoryRecord(entry.name, entry.inode(), _type_hint(entry))

    def close(self) -> None:
        self._it.close()


def _type_hint(entry: os.DirEntry) -> EntryType:
    # DirEntry only distinguishes links, directories and regular files;
    # anything else comes back UNKNOWN and gets a full lstat from the walker.
    try:
        if entry.is_symlink():
            return EntryType.SYMLINK
        if entry.is_dir(follow_symlinks=False):
            return EntryType.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryType.REGULAR
    except OSError:
        pass
    return EntryType.UNKNOWN


class OSBackend(Backend):
    """The local filesystem via os.lstat() and os.scandir()."""

    def lstat(self, path: str) -> os.stat_result:
        return os.lstat(path)

    def opendir(self, path: str) -> DirectoryHandle:
        return ScandirHandle(path)


default_backend = OSBackend()
