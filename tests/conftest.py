"""
Pytest configuration and fixtures
"""

import errno
import os
import stat
from types import SimpleNamespace

import pytest

from fastwalk import Backend, DirectoryHandle, DirectoryRecord, EntryType


class FakeHandle(DirectoryHandle):
    """Directory stream over a FakeBackend directory; counts open handles."""

    def __init__(self, backend, path):
        self.backend = backend
        self.path = path
        self.closed = False
        names = ['.', '..'] + list(backend.children[path])
        self._records = iter(names)
        self._served = 0
        backend.open_handles += 1

    def read(self):
        fail_after = self.backend.fail_read.get(self.path)
        if fail_after is not None and self._served >= fail_after:
            raise OSError(errno.EIO, "Input/output error")
        name = next(self._records, None)
        if name is None:
            return None
        if name in ('.', '..'):
            return DirectoryRecord(name, 0, EntryType.DIRECTORY)
        self._served += 1
        child = self.backend.join(self.path, name)
        inode, mode = self.backend.nodes[child]
        hint = self.backend.hints.get(child, EntryType.from_mode(mode))
        return DirectoryRecord(name, inode, hint)

    def close(self):
        if not self.closed:
            self.closed = True
            self.backend.open_handles -= 1


class FakeBackend(Backend):
    """
    In-memory filesystem for walker tests.

    Records every lstat/opendir call and tracks how many handles are open.
    """

    def __init__(self):
        self.nodes = {}
        self.children = {}
        self.hints = {}
        self.fail_lstat = set()
        self.fail_open = set()
        self.fail_read = {}
        self.lstat_calls = []
        self.opendir_calls = []
        self.open_handles = 0
        self._next_inode = 100

    @staticmethod
    def join(parent, name):
        return parent.rstrip('/') + '/' + name

    def add(self, path, mode, inode=None, hint=None):
        if inode is None:
            inode = self._next_inode
            self._next_inode += 1
        self.nodes[path] = (inode, mode)
        parent, _, name = path.rpartition('/')
        parent = parent or '/'
        if parent in self.children and parent != path:
            self.children[parent].append(name)
        if hint is not None:
            self.hints[path] = hint
        return inode

    def add_dir(self, path, **kwargs):
        inode = self.add(path, stat.S_IFDIR | 0o755, **kwargs)
        self.children[path] = []
        return inode

    def add_file(self, path, **kwargs):
        return self.add(path, stat.S_IFREG | 0o644, **kwargs)

    def add_symlink(self, path, **kwargs):
        return self.add(path, stat.S_IFLNK | 0o777, **kwargs)

    def lstat(self, path):
        self.lstat_calls.append(path)
        if path in self.fail_lstat or path not in self.nodes:
            raise OSError(errno.ENOENT, "No such file or directory", path)
        inode, mode = self.nodes[path]
        return SimpleNamespace(st_ino=inode, st_mode=mode)

    def opendir(self, path):
        self.opendir_calls.append(path)
        if path in self.fail_open:
            raise OSError(errno.EACCES, "Permission denied", path)
        if path not in self.children:
            raise OSError(errno.ENOTDIR, "Not a directory", path)
        return FakeHandle(self, path)


@pytest.fixture
def fake_fs():
    """Empty in-memory filesystem."""
    return FakeBackend()


@pytest.fixture
def r_tree(fake_fs):
    """
    In-memory tree:

    /r/
    ├── a
    └── b/
        └── c
    """
    fake_fs.add_dir('/r', inode=2)
    fake_fs.add_file('/r/a', inode=11)
    fake_fs.add_dir('/r/b', inode=12)
    fake_fs.add_file('/r/b/c', inode=21)
    return fake_fs


@pytest.fixture
def collector():
    """Callback that records (path, descriptor) pairs."""
    class Collector:
        def __init__(self):
            self.visited = []

        def __call__(self, path, descriptor):
            self.visited.append((path, descriptor))

        @property
        def paths(self):
            return [p for p, _ in self.visited]

        def by_path(self):
            return dict(self.visited)

    return Collector()


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def simple_tree(tmp_path):
    """
    Create a simple test directory tree:

    test_root/
    ├── dir1/
    │   ├── file1.txt
    │   └── file2.dat
    ├── dir2/
    │   └── subdir/
    │       └── file3.log
    └── file0.txt
    """
    root = tmp_path / "test_root"
    root.mkdir()

    # Root file
    (root / "file0.txt").write_text("root file")

    # dir1
    dir1 = root / "dir1"
    dir1.mkdir()
    (dir1 / "file1.txt").write_text("file in dir1")
    (dir1 / "file2.dat").write_bytes(b"binary data")

    # dir2 with subdirectory
    dir2 = root / "dir2"
    dir2.mkdir()
    subdir = dir2 / "subdir"
    subdir.mkdir()
    (subdir / "file3.log").write_text("log entry")

    return root


@pytest.fixture
def large_flat_tree(tmp_path):
    """
    Create a tree with many files in one directory.
    Used for performance testing.
    """
    root = tmp_path / "large_flat"
    root.mkdir()

    for i in range(100):
        (root / f"file_{i:04d}.txt").write_text(f"content {i}")

    return root


@pytest.fixture
def deep_tree(tmp_path):
    """
    Create a deep directory tree (10 levels).
    """
    root = tmp_path / "deep_tree"
    current = root
    current.mkdir()

    for level in range(10):
        (current / f"file_level_{level}.txt").write_text(f"level {level}")
        current = current / f"level_{level}"
        current.mkdir()

    return root


@pytest.fixture
def tree_with_symlinks(tmp_path):
    """
    Create a tree with symbolic links.
    """
    root = tmp_path / "symlink_tree"
    root.mkdir()

    # Real files
    real_dir = root / "real"
    real_dir.mkdir()
    (real_dir / "file.txt").write_text("real file")

    # Symlink to directory
    (root / "link_to_dir").symlink_to(real_dir)

    # Symlink to file
    (root / "link_to_file.txt").symlink_to(real_dir / "file.txt")

    # Dangling symlink
    (root / "dangling").symlink_to(root / "missing")

    return root


@pytest.fixture
def tree_with_permissions(tmp_path):
    """
    Create a tree with various permissions.
    """
    if hasattr(os, "geteuid") and os.geteuid() == 0:
        pytest.skip("permission checks are bypassed for root")

    root = tmp_path / "perm_tree"
    root.mkdir()

    # Readable directory
    readable = root / "readable"
    readable.mkdir()
    (readable / "file.txt").write_text("can read")

    # Restricted directory (no read permission)
    restricted = root / "restricted"
    restricted.mkdir()
    (restricted / "hidden.txt").write_text("cannot read")
    os.chmod(restricted, 0o000)

    yield root

    # Cleanup: restore permissions
    os.chmod(restricted, 0o755)


@pytest.fixture
def filesystem_tree(tmp_path):
    """
    Generate comprehensive test filesystem tree with various file types.
    """
    root = tmp_path / "comprehensive"
    root.mkdir()

    # Create varied structure
    structure = {
        'depth': 3,
        'dirs_per_level': 3,
        'files_per_dir': 5,
    }

    def create_level(parent, depth):
        if depth == 0:
            return

        for d in range(structure['dirs_per_level']):
            dir_path = parent / f"dir_{depth}_{d}"
            dir_path.mkdir()

            # Create files
            for f in range(structure['files_per_dir']):
                file_path = dir_path / f"file_{f}.txt"
                file_path.write_text(f"depth={depth}, dir={d}, file={f}")

            # Recurse
            create_level(dir_path, depth - 1)

    create_level(root, structure['depth'])

    return root
