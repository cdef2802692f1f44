"""
types.py - entry type classification and descriptors
"""

import stat
from dataclasses import dataclass
from enum import IntEnum


class EntryType(IntEnum):
    """Entry classification, valued like the POSIX DT_* constants."""

    UNKNOWN = 0
    FIFO = 1
    CHAR_DEVICE = 2
    DIRECTORY = 4
    BLOCK_DEVICE = 6
    REGULAR = 8
    SYMLINK = 10
    SOCKET = 12

    @classmethod
    def from_mode(cls, mode: int) -> "EntryType":
        """
        Map stat mode bits to an EntryType.

        Args:
            mode: st_mode from a (link-aware) stat call

        Returns:
            The matching EntryType, or UNKNOWN for unrecognized modes

        Examples:
            >>> EntryType.from_mode(0o040755)
            <EntryType.DIRECTORY: 4>
        """
        for test, entry_type in _MODE_TESTS:
            if test(mode):
                return entry_type
        return cls.UNKNOWN


_MODE_TESTS = (
    (stat.S_ISREG, EntryType.REGULAR),
    (stat.S_ISDIR, EntryType.DIRECTORY),
    (stat.S_ISCHR, EntryType.CHAR_DEVICE),
    (stat.S_ISBLK, EntryType.BLOCK_DEVICE),
    (stat.S_ISFIFO, EntryType.FIFO),
    (stat.S_ISLNK, EntryType.SYMLINK),
    (stat.S_ISSOCK, EntryType.SOCKET),
)


@dataclass(frozen=True)
class EntryDescriptor:
    """
    Name, inode and type of an entry at the time it was looked at.

    The type is fixed when the descriptor is created; if the entry changes
    on disk afterwards the descriptor is simply stale.
    """

    name: str
    inode: int
    type: EntryType

    @property
    def is_dir(self) -> bool:
        return self.type is EntryType.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.type is EntryType.SYMLINK
