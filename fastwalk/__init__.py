"""
fastwalk - recursive, symlink-aware filesystem tree walker
"""

from .backend import Backend, DirectoryHandle, DirectoryRecord, OSBackend
from .errors import (
    AllocationError,
    DirectoryOpenError,
    EntryLookupError,
    EnumerationError,
    WalkError,
)
from .resolver import resolve
from .types import EntryDescriptor, EntryType
from .walker import Walker, walk

__version__ = '0.1.0'

__all__ = [
    'walk',
    'Walker',
    'resolve',
    'EntryDescriptor',
    'EntryType',
    'Backend',
    'DirectoryHandle',
    'DirectoryRecord',
    'OSBackend',
    'WalkError',
    'EntryLookupError',
    'DirectoryOpenError',
    'EnumerationError',
    'AllocationError',
]
