"""
errors.py - errors reported while walking a tree

None of these abort a walk. The walker logs them, hands them to the
``onerror`` callback and skips the affected entry or subtree.
"""

from typing import Optional


class WalkError(OSError):
    """
    Base class for per-entry walk failures.

    Subclasses OSError so that ``onerror`` callbacks written for os.walk()
    accept them unchanged. ``filename`` is the offending path; ``errno`` and
    ``strerror`` are copied from the underlying OSError when there is one.
    """

    action = "walk"

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        errno = getattr(cause, "errno", None)
        strerror = getattr(cause, "strerror", None) or str(cause or "") or self.action
        super().__init__(errno, strerror, path)
        self.path = path
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.action} '{self.path}': {self.strerror}"


class EntryLookupError(WalkError):
    """Link-aware metadata query failed for a path."""

    action = "lstat"


class DirectoryOpenError(WalkError):
    """A directory could not be opened for enumeration."""

    action = "opendir"


class EnumerationError(WalkError):
    """Reading a directory stream failed part way through."""

    action = "readdir"


class AllocationError(WalkError):
    """Building a path or descriptor ran out of memory."""

    action = "memory"
