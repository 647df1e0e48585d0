"""Filesystem operations for Zettel files.

INVARIANT: Files are truth. A handle's metadata is whatever the file
held when the handle was built; nothing is cached beyond that.

Pure parsing lives in :mod:`zettel.domain.metadata` (correct dependency
direction: infrastructure -> domain). This module does the actual I/O.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from zettel.domain.metadata import parse_metadata, split_header


def file_exists(path: Path) -> bool:
    """Return True if *path* denotes a regular file."""
    return path.is_file()


def read_header_block(path: Path) -> str:
    """Read *path* and return only its metadata block.

    The block ends at the first blank line; the body is discarded.
    """
    content = path.read_text(encoding="utf-8")
    return split_header(content)


def load_metadata(path: Path) -> dict[str, Any]:
    """Read and decode the metadata block of *path*.

    Raises:
        MetadataDecodeError: If the block is not a YAML mapping.
        OSError: If the file cannot be read.
    """
    return parse_metadata(read_header_block(path))
