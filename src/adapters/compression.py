"""Gzip variants of the bundle outputs.

The whole file is read into memory: bundle assets are small. The gzip header
timestamp is pinned to 0 so identical inputs give identical `.gz` bytes.
"""

from __future__ import annotations

import gzip
from pathlib import Path


def gzip_sibling_path(path: Path) -> Path:
    return path.with_name(path.name + ".gz")


def write_gzip_sibling(path: Path, *, level: int = 9) -> Path:
    """Write `<path>.gz` next to `path` and return its location."""

    payload = gzip.compress(path.read_bytes(), compresslevel=level, mtime=0)
    target = gzip_sibling_path(path)
    target.write_bytes(payload)
    return target
