"""Zettelkasten — the archive registry.

Owns the archive root, the closed set of kasten, and the file extension.
Answers two questions: where does a kasten live, and which kasten (if
any) holds a given path. It never touches file contents.

The registry is built once from a frozen :class:`ArchiveConfig` and
never mutates, so one instance can be shared freely.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from zettel.config.models import ArchiveConfig
from zettel.domain.errors import UnknownKasten
from zettel.domain.types import MAIN_KASTEN, ZettelType

if TYPE_CHECKING:
    from zettel.config.settings import ZettelSettings
    from zettel.domain.ids import ZettelId

logger = logging.getLogger(__name__)


class Zettelkasten:
    """Registry of the kasten under one archive root.

    Usage::

        archive = Zettelkasten(ArchiveConfig(root=Path("/archive")))
        archive.directory("tech")          # Path("/archive/tech")
        archive.kasten_of("/archive/tech/20240115T0930.txt")  # "tech"
    """

    def __init__(self, config: ArchiveConfig | None = None) -> None:
        self._config = config or ArchiveConfig()
        self._dirs: dict[str, Path] = {name: self.root / name for name in self._config.kaesten}

    @classmethod
    def from_settings(cls, settings: ZettelSettings) -> Zettelkasten:
        return cls(settings.archive_config())

    @property
    def config(self) -> ArchiveConfig:
        return self._config

    @property
    def root(self) -> Path:
        return self._config.root

    @property
    def ext(self) -> str:
        return self._config.ext

    @property
    def kaesten(self) -> tuple[str, ...]:
        return self._config.kaesten

    def directory(self, kasten: str) -> Path:
        """Return the directory of *kasten*.

        Raises:
            UnknownKasten: If *kasten* is not configured.
        """
        try:
            return self._dirs[kasten]
        except KeyError:
            raise UnknownKasten(kasten) from None

    def is_kasten(self, name: str) -> bool:
        """Return True if *name* is a configured kasten."""
        return name in self._dirs

    def kasten_of(self, path: str | PurePath) -> str | None:
        """Return the kasten that *path* lies under, or None.

        Relative paths are taken relative to the current directory. A path
        outside the root, or under an unconfigured directory, is not an
        error: the answer is simply None.
        """
        absolute = Path(os.path.abspath(path))
        try:
            relative = absolute.relative_to(self.root)
        except ValueError:
            logger.debug("Path %s is outside archive root %s", absolute, self.root)
            return None
        if not relative.parts:
            return None
        candidate = relative.parts[0]
        return candidate if candidate in self._dirs else None

    def includes(self, path: str | PurePath) -> bool:
        """Return True if *path* lies under a configured kasten."""
        return self.kasten_of(path) is not None

    def zettel_type(self, path: str | PurePath) -> ZettelType:
        """Return the identifier scheme used for files at *path*.

        Only meaningful for paths in the archive; check
        :meth:`kasten_of` first.
        """
        return ZettelType.NUMERUS if self.kasten_of(path) == MAIN_KASTEN else ZettelType.TEMPUS

    def path_of(self, ident: ZettelId) -> Path:
        """Return the absolute file path for *ident*.

        Raises:
            UnknownKasten: If the identifier's kasten is not configured.
        """
        self.directory(ident.kasten)
        return self.root / ident.location(self.ext)
