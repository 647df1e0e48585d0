"""Identifier grammars: slug patterns, link patterns, placement rules.

Two schemes, both stateless:

- Numerus currens (``main`` kasten only): ``NNN`` optionally followed by
  dash-separated lowercase letter groups, e.g. ``042`` or ``042-abc``.
  The link is the slug itself. Files are sharded into hundred-wide
  sections: ``main/000-099/042-abc.txt``.
- Tempus (every other kasten): ``YYYYMMDDTHHMM``. The link carries the
  kasten, ``tech:20240115T0930``. Files sit directly in the kasten:
  ``tech/20240115T0930.txt``.

INVARIANT: No string matches both link patterns. Resolution still tries
Numerus first and callers must not rely on the non-overlap.
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import PurePath
from typing import Protocol

from zettel.domain.errors import MalformedIdentifier, OutOfRange
from zettel.domain.types import ZettelType

NUMERUS_SLUG_PATTERN = re.compile(r"^([0-9]{3})(-([a-z]+))*$")
NUMERUS_LINK_PATTERN = NUMERUS_SLUG_PATTERN

TEMPUS_SLUG_PATTERN = re.compile(r"^\d{8}T\d{4}$")
TEMPUS_LINK_PATTERN = re.compile(r"^([a-z]+):(\d{8}T\d{4})$")

TEMPUS_TIME_FORMAT = "%Y%m%dT%H%M"

SLUG_PATTERNS: dict[ZettelType, re.Pattern[str]] = {
    ZettelType.NUMERUS: NUMERUS_SLUG_PATTERN,
    ZettelType.TEMPUS: TEMPUS_SLUG_PATTERN,
}

LINK_PATTERNS: dict[ZettelType, re.Pattern[str]] = {
    ZettelType.NUMERUS: NUMERUS_LINK_PATTERN,
    ZettelType.TEMPUS: TEMPUS_LINK_PATTERN,
}

# Resolution order for links and paths of unknown type.
PRIORITY: tuple[ZettelType, ...] = (ZettelType.NUMERUS, ZettelType.TEMPUS)

# FIXME: hardcoded to the main kasten layout; does not check that the
# section actually matches the slug's number.
_NUMERUS_DIR_PATTERN = re.compile(r"main/\d{3}-\d{3}$")


class ArchiveMembership(Protocol):
    """Anything that can tell whether a path lies inside the archive."""

    def includes(self, path: str | PurePath) -> bool: ...


def section_of(slug: str) -> str:
    """Return the ``main`` sub-directory that holds numerus *slug*.

    Examples:
        >>> section_of("042-ab")
        '000-099'
        >>> section_of("427")
        '400-499'

    Raises:
        MalformedIdentifier: If *slug* is not a numerus currens.
        OutOfRange: If the number falls outside 0-999.
    """
    match = NUMERUS_SLUG_PATTERN.match(slug)
    if match is None:
        raise MalformedIdentifier(slug, "not a numerus currens")
    num = int(match.group(1))
    if 0 <= num <= 99:
        return "000-099"
    if 100 <= num <= 999:
        return f"{slug[0]}00-{slug[0]}99"
    # Unreachable: the pattern limits the numerus to three digits.
    raise OutOfRange(slug)


def parse_time(slug: str) -> datetime:
    """Parse a tempus slug into a naive :class:`datetime`.

    The pattern alone accepts ``20231301T0000``; this rejects it.
    """
    if TEMPUS_SLUG_PATTERN.match(slug) is None:
        raise MalformedIdentifier(slug, "not a tempus slug")
    try:
        return datetime.strptime(slug, TEMPUS_TIME_FORMAT)
    except ValueError as exc:
        raise MalformedIdentifier(slug, f"not a valid date and time ({exc})") from exc


def stem_of(path: str | PurePath, ext: str) -> str:
    """Return the file name of *path* with *ext* stripped, if present."""
    name = PurePath(path).name
    if ext and name.endswith(ext) and name != ext:
        return name[: -len(ext)]
    return name


def valid_slug(zettel_type: ZettelType, text: str) -> bool:
    """Check *text* against the slug pattern for *zettel_type*."""
    return SLUG_PATTERNS[zettel_type].match(text) is not None


def valid_link(zettel_type: ZettelType, text: str) -> bool:
    """Check *text* against the link pattern for *zettel_type*.

    A pure pattern check: the kasten of a tempus link is not validated
    and neither is the calendar date.
    """
    return LINK_PATTERNS[zettel_type].match(text) is not None


def valid_path(
    zettel_type: ZettelType,
    path: str | PurePath,
    *,
    ext: str,
    archive: ArchiveMembership | None = None,
) -> bool:
    """Check whether *path* looks like the file of a *zettel_type* Zettel.

    Numerus paths need a slug-shaped file name under a ``main/NNN-NNN``
    directory. Tempus paths need a slug-shaped file name inside the
    archive, so *archive* is required for them.
    """
    if not valid_slug(zettel_type, stem_of(path, ext)):
        return False
    if zettel_type is ZettelType.NUMERUS:
        return _NUMERUS_DIR_PATTERN.search(PurePath(path).parent.as_posix()) is not None
    if archive is None:
        msg = "Validating a tempus path requires an archive"
        raise TypeError(msg)
    return archive.includes(path)
