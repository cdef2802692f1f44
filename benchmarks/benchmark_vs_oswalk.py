#!/usr/bin/env python3
"""
Benchmark fastwalk.walk() vs os.walk().

Both count every entry (directories, files, links) below a generated tree.
"""

import os
import time
import tempfile
from pathlib import Path


def create_test_tree(root, depth=3, dirs_per_level=5, files_per_dir=20):
    """Create a test directory tree with specified structure."""

    def create_level(parent, current_depth):
        if current_depth > depth:
            return

        # Create files in this directory
        for i in range(files_per_dir):
            filepath = parent / f"file_{i}.txt"
            filepath.write_text(f"test content {i}\n")

        # Create subdirectories
        for i in range(dirs_per_level):
            subdir = parent / f"dir_{i}"
            subdir.mkdir(exist_ok=True)
            create_level(subdir, current_depth + 1)

    root_path = Path(root)
    root_path.mkdir(parents=True, exist_ok=True)
    create_level(root_path, 1)


def count_entries_oswalk(path):
    """Count entries using os.walk()."""
    count = 1
    for dirpath, dirnames, filenames in os.walk(path):
        count += len(dirnames) + len(filenames)
    return count


def count_entries_fastwalk(path):
    """Count entries using fastwalk.walk()."""
    from fastwalk import walk
    count = 0

    def cb(entry_path, descriptor):
        nonlocal count
        count += 1

    walk(path, cb)
    return count


def benchmark_walk(path, name, func, iterations=3):
    """Benchmark a walk function."""
    times = []

    for i in range(iterations):
        start = time.time()
        count = func(path)
        elapsed = time.time() - start
        times.append(elapsed)

    avg_time = sum(times) / len(times)

    return {
        'name': name,
        'count': count,
        'avg_time': avg_time,
        'min_time': min(times),
        'max_time': max(times),
        'entries_per_sec': count / avg_time if avg_time else 0.0,
    }


def main():
    print("=" * 70)
    print("fastwalk.walk() vs os.walk() Benchmark")
    print("=" * 70)

    configs = [
        {'name': 'Small', 'depth': 2, 'dirs': 3, 'files': 10},
        {'name': 'Medium', 'depth': 3, 'dirs': 5, 'files': 20},
        {'name': 'Large', 'depth': 4, 'dirs': 4, 'files': 30},
    ]

    for config in configs:
        print(f"\n{config['name']} Tree (depth={config['depth']}, "
              f"dirs={config['dirs']}, files={config['files']}):")
        print("-" * 70)

        with tempfile.TemporaryDirectory() as tmpdir:
            create_test_tree(
                tmpdir,
                depth=config['depth'],
                dirs_per_level=config['dirs'],
                files_per_dir=config['files']
            )

            oswalk_result = benchmark_walk(tmpdir, 'os.walk()', count_entries_oswalk)
            fastwalk_result = benchmark_walk(tmpdir, 'fastwalk.walk()', count_entries_fastwalk)

            for result in (oswalk_result, fastwalk_result):
                print(f"  {result['name']:<16} {result['avg_time']:.4f}s "
                      f"({result['count']:,} entries, {result['entries_per_sec']:,.0f}/sec)")

            if oswalk_result['count'] != fastwalk_result['count']:
                print("  WARNING: entry counts differ")

            if fastwalk_result['avg_time'] > 0:
                ratio = oswalk_result['avg_time'] / fastwalk_result['avg_time']
                print(f"\n  os.walk() time / fastwalk time: {ratio:.2f}")

    print("\n" + "=" * 70)
    print("Benchmark Complete")
    print("=" * 70)


if __name__ == '__main__':
    main()
