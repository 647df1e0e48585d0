"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, zettel.toml only contains
overrides. Most archives need no config file at all; the root comes
from ``ZETTEL_DIR``.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from zettel.domain.types import MAIN_KASTEN

DEFAULT_ROOT = Path("~/Dropbox/Zettel")
DEFAULT_KAESTEN: tuple[str, ...] = (MAIN_KASTEN, "limbo", "tech", "writing")
DEFAULT_EXT = ".txt"

# Kasten names must be able to prefix a tempus link.
_KASTEN_NAME = re.compile(r"^[a-z]+$")


class ArchiveConfig(BaseModel):
    """Layout of one archive: root directory, kasten names, file extension.

    Frozen after construction; safe to share across threads.
    """

    model_config = {"frozen": True}

    root: Path = Field(default=DEFAULT_ROOT, validate_default=True)
    kaesten: tuple[str, ...] = DEFAULT_KAESTEN
    ext: str = DEFAULT_EXT

    @field_validator("root")
    @classmethod
    def _absolute_root(cls, value: Path) -> Path:
        return Path(os.path.abspath(value.expanduser()))

    @field_validator("kaesten")
    @classmethod
    def _check_kaesten(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        bad = [name for name in value if not _KASTEN_NAME.match(name)]
        if bad:
            msg = f"Kasten names must be lowercase letters only: {bad}"
            raise ValueError(msg)
        if MAIN_KASTEN not in value:
            msg = f"The {MAIN_KASTEN!r} kasten is required, got {list(value)}"
            raise ValueError(msg)
        if len(set(value)) != len(value):
            msg = f"Duplicate kasten names: {list(value)}"
            raise ValueError(msg)
        return value

    @field_validator("ext")
    @classmethod
    def _check_ext(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            msg = f"Extension must start with '.', got {value!r}"
            raise ValueError(msg)
        return value
