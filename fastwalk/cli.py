"""
cli.py - print every entry under one or more paths

    fastwalk [-l] [-v] [PATH ...]
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .types import EntryDescriptor
from .walker import walk


def print_short(path: str, descriptor: EntryDescriptor) -> None:
    kind = "DIR" if descriptor.is_dir else "OTH"
    print(f"[{kind}] {path}")


def print_long(path: str, descriptor: EntryDescriptor) -> None:
    print(f"{descriptor.inode:>12} {descriptor.type.name:<12} {path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fastwalk',
        description='Walk filesystem trees and print every entry (symlinks are not followed).',
    )
    parser.add_argument('paths', nargs='*', metavar='PATH',
                        help='Paths to walk (default: .)')
    parser.add_argument('-l', '--long', action='store_true',
                        help='Print inode and entry type')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = 'DEBUG' if args.verbose else os.environ.get('FASTWALK_LOG_LEVEL', 'WARNING').upper()
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    # Undecodable names arrive from scandir as surrogate escapes; print their original bytes.
    if hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(errors='surrogateescape')

    callback = print_long if args.long else print_short
    errors = []
    for path in args.paths or ['.']:
        errors.extend(walk(path, callback))

    return 1 if errors else 0


if __name__ == '__main__':
    sys.exit(main())
