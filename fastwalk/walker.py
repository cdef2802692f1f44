"""
walker.py - recursive, symlink-aware filesystem tree walker
"""

import logging
import os
import sys
import warnings
from typing import Callable, List, Optional, Union

from .backend import Backend, DirectoryHandle, DirectoryRecord, default_backend
from .errors import (
    AllocationError,
    DirectoryOpenError,
    EnumerationError,
    WalkError,
)
from .resolver import resolve
from .types import EntryDescriptor, EntryType

logger = logging.getLogger(__name__)

Callback = Callable[[str, EntryDescriptor], None]
ErrorCallback = Callable[[OSError], None]

# The only names enumeration ever filters out.
_DOTS = frozenset((".", ".."))


def join_path(parent: str, name: str) -> str:
    """Join with exactly one separator, even when ``parent`` is "/"."""
    if parent.endswith(os.sep):
        return parent + name
    return parent + os.sep + name


class Walker:
    """
    Depth-first walk over one tree.

    The callback fires once per entry that could be described. Failures are
    reported (logged, collected in ``errors`` and passed to ``onerror``) and
    only cost the entry or subtree they happened in.
    """

    def __init__(
        self,
        callback: Callback,
        backend: Optional[Backend] = None,
        onerror: Optional[ErrorCallback] = None,
    ):
        self.callback = callback
        self.backend = backend if backend is not None else default_backend
        self.onerror = onerror
        self.errors: List[WalkError] = []

    def report(self, error: WalkError) -> None:
        logger.warning("%s", error)
        self.errors.append(error)
        if self.onerror is not None:
            self.onerror(error)

    def visit_entry(self, path: str, descriptor: Optional[EntryDescriptor] = None) -> None:
        """
        Visit ``path`` and, if it is a directory, everything below it.

        Args:
            path: Full path of the entry
            descriptor: Descriptor already known from enumeration; looked up
                with lstat when omitted
        """
        if descriptor is None:
            try:
                descriptor = resolve(path, self.backend)
            except WalkError as e:
                self.report(e)
                return

        self.callback(path, descriptor)

        if descriptor.type is not EntryType.DIRECTORY:
            return

        try:
            handle = self.backend.opendir(path)
        except OSError as e:
            self.report(DirectoryOpenError(path, e))
            return

        with handle:
            self.enumerate_directory(path, handle)

    def enumerate_directory(self, path: str, handle: DirectoryHandle) -> None:
        """Visit every child of the open directory ``path``."""
        while True:
            try:
                record = handle.read()
            except OSError as e:
                self.report(EnumerationError(path, e))
                return
            if record is None:
                return

            if record.name in _DOTS:
                continue

            try:
                child_path = join_path(path, record.name)
            except MemoryError as e:
                self.report(AllocationError(path, e))
                continue

            child = self._describe(child_path, record)
            if child is not None:
                self.visit_entry(child_path, child)

    def _describe(self, path: str, record: DirectoryRecord) -> Optional[EntryDescriptor]:
        if record.type_hint is EntryType.UNKNOWN:
            logger.debug("no type from readdir for '%s', falling back to lstat", path)
            try:
                return resolve(path, self.backend)
            except WalkError as e:
                self.report(e)
                return None

        try:
            return EntryDescriptor(record.name, record.inode, record.type_hint)
        except MemoryError as e:
            self.report(AllocationError(path, e))
            return None


def check_recursion_limit(min_limit: Optional[int] = None) -> bool:
    """
    Warn when the interpreter recursion limit is below ``min_limit``.

    Each directory level costs two Python frames, so the reachable depth is
    roughly half the recursion limit.

    Args:
        min_limit: Required limit (default: FASTWALK_MIN_RECURSION_LIMIT or 1000)

    Returns:
        True if the current limit is sufficient
    """
    if min_limit is None:
        min_limit = int(os.environ.get('FASTWALK_MIN_RECURSION_LIMIT', 1000))

    limit = sys.getrecursionlimit()
    if limit < min_limit:
        warnings.warn(
            f"recursion limit {limit} is below {min_limit}; deep trees may raise RecursionError",
            RuntimeWarning,
            stacklevel=3,
        )
        return False
    return True


def walk(
    path: Union[str, os.PathLike],
    callback: Callback,
    descriptor: Optional[EntryDescriptor] = None,
    onerror: Optional[ErrorCallback] = None,
    backend: Optional[Backend] = None,
    min_recursion_limit: Optional[int] = None,
) -> List[WalkError]:
    """
    Call ``callback(path, descriptor)`` for every entry reachable from ``path``.

    Entries are classified with lstat semantics: symbolic links are reported
    as SYMLINK and never followed. ``.`` and ``..`` are never reported.
    Sibling order is whatever the directory stream yields.

    Args:
        path: Starting path (file or directory)
        callback: Called once per entry with its full path and descriptor
        descriptor: Descriptor for ``path`` if the caller already has one
        onerror: Called with each WalkError as it is reported
        backend: Filesystem to walk (default: the local filesystem)
        min_recursion_limit: See check_recursion_limit()

    Returns:
        List of errors reported during the walk (empty on a clean walk)

    Examples:
        >>> seen = []
        >>> errors = walk('/data', lambda p, d: seen.append(p))

        >>> # Collect directories only
        >>> dirs = []
        >>> walk('/data', lambda p, d: d.is_dir and dirs.append(p))
    """
    check_recursion_limit(min_recursion_limit)

    walker = Walker(callback, backend=backend, onerror=onerror)
    walker.visit_entry(os.fspath(path), descriptor)
    return walker.errors
