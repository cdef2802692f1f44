#!/usr/bin/env python
"""
Setup script for fastwalk
"""

from setuptools import setup
from pathlib import Path

# Read long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

setup(
    name='fastwalk',
    version='0.1.0',
    author='fastwalk developers',
    description='Recursive, symlink-aware filesystem tree walker with per-entry callbacks',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=['fastwalk'],
    python_requires='>=3.10',
    install_requires=[
        # No required dependencies
    ],
    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-cov>=4.0.0',
            'pytest-benchmark>=4.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'fastwalk=fastwalk.cli:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: System Administrators',
        'Intended Audience :: Developers',
        'Topic :: System :: Filesystems',
        'Topic :: System :: Systems Administration',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Operating System :: POSIX',
    ],
    keywords='filesystem walk readdir lstat tree traversal',
)
