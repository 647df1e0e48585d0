"""Parsed identifiers, one type per naming scheme.

``ZettelId`` is a tagged union: a :class:`NumerusId` or a
:class:`TempusId`. Both expose ``zettel_type``, ``kasten``, ``slug`` and
``link``; each carries only the fields that make sense for its scheme.

INVARIANT: ``link`` round-trips. Parsing ``ident.link`` with the same
scheme yields an equal identifier.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import PurePath

from zettel.domain.errors import MalformedIdentifier
from zettel.domain.grammars import (
    NUMERUS_LINK_PATTERN,
    TEMPUS_LINK_PATTERN,
    parse_time,
    section_of,
)
from zettel.domain.types import MAIN_KASTEN, ZettelType


@dataclass(frozen=True)
class NumerusId:
    """A numerus currens identifier, e.g. ``042-abc``."""

    slug: str
    numerus: int  # leading three digits
    litterae: str | None  # letters of the last dash group, if any
    section: str  # main sub-directory, e.g. "000-099"

    zettel_type = ZettelType.NUMERUS
    kasten = MAIN_KASTEN

    @property
    def link(self) -> str:
        return self.slug

    def location(self, ext: str) -> PurePath:
        """Archive-relative file location."""
        return PurePath(self.kasten, self.section, f"{self.slug}{ext}")


@dataclass(frozen=True)
class TempusId:
    """A tempus identifier, e.g. ``tech:20240115T0930``."""

    kasten: str
    slug: str
    time: datetime

    zettel_type = ZettelType.TEMPUS

    @property
    def link(self) -> str:
        return f"{self.kasten}:{self.slug}"

    def location(self, ext: str) -> PurePath:
        """Archive-relative file location."""
        return PurePath(self.kasten, f"{self.slug}{ext}")


ZettelId = NumerusId | TempusId


def parse_numerus(link: str) -> NumerusId | None:
    """Parse a numerus link, returning None if *link* is not one."""
    match = NUMERUS_LINK_PATTERN.match(link)
    if match is None:
        return None
    return NumerusId(
        slug=link,
        numerus=int(match.group(1)),
        litterae=match.group(3),
        section=section_of(link),
    )


def parse_tempus(link: str) -> TempusId | None:
    """Parse a tempus link, returning None if *link* is not one.

    The kasten is not checked against any configuration here; that is
    the resolver's job.

    Raises:
        MalformedIdentifier: If the link matches but names the ``main``
            kasten or an impossible date and time.
    """
    match = TEMPUS_LINK_PATTERN.match(link)
    if match is None:
        return None
    kasten, slug = match.group(1), match.group(2)
    if kasten == MAIN_KASTEN:
        raise MalformedIdentifier(link, f"tempus Zettel cannot live in the {MAIN_KASTEN!r} kasten")
    return TempusId(kasten=kasten, slug=slug, time=parse_time(slug))


PARSERS = {
    ZettelType.NUMERUS: parse_numerus,
    ZettelType.TEMPUS: parse_tempus,
}
