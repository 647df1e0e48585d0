"""The Zettel handle — canonical, resolved representation of one entry.

Handles are built by :class:`zettel.services.resolver.Resolver` only.
The path is derived from the identifier and the archive root at
construction time and cannot be set on its own.

INVARIANT: A handle never changes after construction. A new slug needs
a new handle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from zettel.domain.errors import NoPathSet
from zettel.domain.ids import NumerusId, TempusId, ZettelId
from zettel.domain.types import ZettelType


@dataclass(frozen=True)
class Zettel:
    """A resolved Zettel.

    Attributes:
        ident: Parsed identifier (numerus or tempus).
        root: Archive root the path was computed against.
        path: Absolute path of the Zettel file.
        metadata: Decoded metadata block, or None if the file did not
            exist when the handle was built.
    """

    ident: ZettelId
    root: Path
    path: Path | None
    metadata: dict[str, Any] | None = field(default=None, compare=False)

    @property
    def zettel_type(self) -> ZettelType:
        return self.ident.zettel_type

    @property
    def kasten(self) -> str:
        return self.ident.kasten

    @property
    def slug(self) -> str:
        return self.ident.slug

    @property
    def link(self) -> str:
        """Wiki link target; kasten-prefixed unless numerus."""
        return self.ident.link

    @property
    def numerus(self) -> int | None:
        return self.ident.numerus if isinstance(self.ident, NumerusId) else None

    @property
    def time(self) -> datetime | None:
        return self.ident.time if isinstance(self.ident, TempusId) else None

    def exists(self) -> bool:
        """Return True if the Zettel file is where it should be."""
        return self.path is not None and self.path.is_file()

    def relative_path(self) -> Path:
        """Return the path relative to the archive root."""
        if self.path is None:
            raise NoPathSet(self.link)
        return self.path.relative_to(self.root)

    def __str__(self) -> str:
        return self.link
