"""Resolver — turn links, paths and raw text into Zettel handles.

Three entry points converge on the same canonical :class:`Zettel`:

- :meth:`Resolver.from_link` / :meth:`Resolver.from_text`: speculative.
  Grammars are tried in priority order (numerus, then tempus) and a
  non-match returns None. Text that matches a grammar but names an
  unknown kasten or an impossible date is a hard error.
- :meth:`Resolver.from_path`: assertive. The path must be in the
  archive; its kasten picks the grammar, priority order is not used.

INVARIANT: ``from_path(z.path).link == z.link`` for every handle ``z``.
"""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import TYPE_CHECKING

from zettel.domain import grammars
from zettel.domain.errors import MalformedIdentifier, MalformedMetadata, NotInArchive, UnknownKasten
from zettel.domain.ids import PARSERS, ZettelId
from zettel.domain.links import extract_links
from zettel.domain.metadata import MetadataDecodeError
from zettel.domain.types import MAIN_KASTEN, ZettelType
from zettel.domain.zettel import Zettel
from zettel.infrastructure.archive import Zettelkasten
from zettel.infrastructure.filesystem import file_exists, load_metadata

if TYPE_CHECKING:
    from zettel.config.settings import ZettelSettings

logger = logging.getLogger(__name__)


class Resolver:
    """Builds :class:`Zettel` handles against one archive."""

    def __init__(self, archive: Zettelkasten) -> None:
        self._archive = archive

    @classmethod
    def from_settings(cls, settings: ZettelSettings) -> Resolver:
        """Build a resolver for the configured archive.

        This is the entry point for an embedding program: logging is
        configured from the ``verbose``/``log_json`` settings here.
        """
        from zettel.config.logging import configure_from_settings

        configure_from_settings(settings)
        return cls(Zettelkasten.from_settings(settings))

    @property
    def archive(self) -> Zettelkasten:
        return self._archive

    # --- Entry points ---

    def from_link(self, link: str) -> Zettel | None:
        """Resolve *link*, or return None if no grammar matches.

        Raises:
            UnknownKasten: If a tempus link names an unconfigured kasten.
            MalformedIdentifier: If a link matches but is semantically
                invalid (impossible date, tempus in ``main``).
            MalformedMetadata: If the Zettel exists with a corrupt header.
        """
        for zettel_type in grammars.PRIORITY:
            ident = PARSERS[zettel_type](link)
            if ident is not None:
                return self._build(ident)
        logger.debug("No grammar matches link %r", link)
        return None

    def from_text(self, text: str) -> Zettel | None:
        """Resolve *text* that may or may not be a link. Same contract as :meth:`from_link`."""
        return self.from_link(text)

    def from_path(self, path: str | PurePath) -> Zettel:
        """Resolve the Zettel stored at *path*.

        The file need not exist; only its location is used.

        Raises:
            NotInArchive: If *path* is not under a configured kasten.
            MalformedIdentifier: If the file name does not fit the
                kasten's grammar.
        """
        kasten = self._archive.kasten_of(path)
        if kasten is None:
            raise NotInArchive(path)
        zettel_type = ZettelType.NUMERUS if kasten == MAIN_KASTEN else ZettelType.TEMPUS
        return self._from_path_as(zettel_type, path, kasten)

    def zettel_at(self, path: str | PurePath) -> Zettel:
        """Return the Zettel at *path*, choosing the scheme by kasten."""
        return self.from_path(path)

    def zettel_from_path(self, path: str | PurePath) -> Zettel | None:
        """Return the Zettel at *path* if it passes a path validator, else None.

        Validators are tried in priority order; unlike :meth:`from_path`
        the scheme is chosen by the validator, not by the kasten.
        """
        for zettel_type in grammars.PRIORITY:
            if self.valid_path(zettel_type, path):
                kasten = self._archive.kasten_of(path)
                if kasten is None:
                    raise NotInArchive(path)
                return self._from_path_as(zettel_type, path, kasten)
        return None

    def scan_links(self, text: str) -> list[Zettel]:
        """Resolve every ``[[link]]`` in *text* that names a Zettel.

        Targets matching no grammar are skipped silently; targets with a
        bad kasten or date are logged and skipped.
        """
        results: list[Zettel] = []
        for ref in extract_links(text):
            try:
                zettel = self.from_text(ref.target)
            except (UnknownKasten, MalformedIdentifier) as exc:
                logger.warning("Skipping unresolvable link %r: %s", ref.target, exc)
                continue
            if zettel is not None:
                results.append(zettel)
        return results

    # --- Validators ---

    def valid_link(self, zettel_type: ZettelType, text: str) -> bool:
        return grammars.valid_link(zettel_type, text)

    def valid_path(self, zettel_type: ZettelType, path: str | PurePath) -> bool:
        return grammars.valid_path(zettel_type, path, ext=self._archive.ext, archive=self._archive)

    # --- Construction ---

    def _from_path_as(self, zettel_type: ZettelType, path: str | PurePath, kasten: str) -> Zettel:
        stem = grammars.stem_of(path, self._archive.ext)
        link = stem if zettel_type is ZettelType.NUMERUS else f"{kasten}:{stem}"
        ident = PARSERS[zettel_type](link)
        if ident is None:
            raise MalformedIdentifier(str(path), f"file name is not a {zettel_type} slug")
        return self._build(ident)

    def _build(self, ident: ZettelId) -> Zettel:
        path = self._archive.path_of(ident)
        metadata = None
        if file_exists(path):
            try:
                metadata = load_metadata(path)
            except (MetadataDecodeError, UnicodeDecodeError) as exc:
                raise MalformedMetadata(path, str(exc)) from exc
        return Zettel(ident=ident, root=self._archive.root, path=path, metadata=metadata)
