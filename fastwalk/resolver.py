"""
resolver.py - build an EntryDescriptor for a bare path
"""

import os
from typing import Optional

from .backend import Backend, default_backend
from .errors import AllocationError, EntryLookupError
from .types import EntryDescriptor, EntryType


def entry_name(path: str) -> str:
    """
    Final component of ``path``: everything after the last separator.

    A path without a separator is its own name, and the filesystem root
    ("/") has the empty name.
    """
    return path.rpartition(os.sep)[2]


def resolve(path: str, backend: Optional[Backend] = None) -> EntryDescriptor:
    """
    Describe ``path`` with a link-aware metadata query.

    A symlink is described as a SYMLINK; its target is never looked at, so a
    dangling link resolves fine.

    Args:
        path: Non-empty path to describe
        backend: Filesystem to query (default: the local filesystem)

    Returns:
        EntryDescriptor with name, inode and type

    Raises:
        EntryLookupError: the metadata query failed (missing entry, EACCES, ...)
        AllocationError: out of memory while building the descriptor
    """
    if backend is None:
        backend = default_backend

    try:
        st = backend.lstat(path)
    except OSError as e:
        raise EntryLookupError(path, e) from e

    try:
        return EntryDescriptor(entry_name(path), st.st_ino, EntryType.from_mode(st.st_mode))
    except MemoryError as e:
        raise AllocationError(path, e) from e
