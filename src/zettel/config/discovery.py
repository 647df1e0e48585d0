"""Config file discovery and loading.

Walk-up finder locates zettel.toml, similar to how git finds .git/.
Supports the ZETTEL_CONFIG env var override. The file is optional.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from zettel.config.models import ArchiveConfig

CONFIG_FILENAME = "zettel.toml"
CONFIG_ENV_VAR = "ZETTEL_CONFIG"
ARCHIVE_SECTION = "archive"


class ConfigError(Exception):
    """A config file exists but cannot be read."""


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for zettel.toml.

    Returns the path to the config file, or None if not found.
    Checks ZETTEL_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def read_archive_section(path: Path) -> dict[str, Any]:
    """Return the ``[archive]`` table of *path*.

    A relative ``root`` is resolved against the config file's directory.

    Raises:
        ConfigError: If the file is not valid TOML or the table is not a table.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        data: dict[str, Any] = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc

    section = data.get(ARCHIVE_SECTION, {})
    if not isinstance(section, dict):
        msg = f"[{ARCHIVE_SECTION}] in {path} must be a table"
        raise ConfigError(msg)

    section = dict(section)
    if "root" in section:
        root = Path(section["root"]).expanduser()
        if not root.is_absolute():
            root = path.parent / root
        section["root"] = root
    return section


def load_config(path: Path | None = None, cwd: Path | None = None) -> ArchiveConfig:
    """Load and validate archive config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default ArchiveConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return ArchiveConfig()

    return ArchiveConfig.model_validate(read_archive_section(path))
