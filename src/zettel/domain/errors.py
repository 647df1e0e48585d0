"""Error taxonomy for identifier, link and path resolution.

Every hard error carries the offending input in ``value`` and in its
message, since links are hand-typed and transcription mistakes are the
common failure. Speculative parsing (``Resolver.from_link``) signals a
non-match with ``None``, never with one of these.
"""

from __future__ import annotations

from typing import Any


class ZettelError(Exception):
    """Base class for all archive resolution errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class UnknownKasten(ZettelError):
    """A kasten name is not in the configured set."""

    def __init__(self, kasten: str) -> None:
        super().__init__(f"Unknown kasten {kasten!r}", kasten)


class NotInArchive(ZettelError):
    """A path that should be inside the archive is not."""

    def __init__(self, path: Any) -> None:
        super().__init__(f"The path is not part of the Zettelkasten: {path}", path)


class MalformedIdentifier(ZettelError, ValueError):
    """Text looks like a slug or link but fails a semantic check."""

    def __init__(self, identifier: str, reason: str) -> None:
        super().__init__(f"Malformed identifier {identifier!r}: {reason}", identifier)
        self.reason = reason


class MalformedMetadata(ZettelError):
    """The metadata block of a Zettel file could not be decoded."""

    def __init__(self, path: Any, detail: str) -> None:
        super().__init__(f"Malformed metadata in {path}: {detail}", path)
        self.detail = detail


class OutOfRange(ZettelError, ValueError):
    """A numerus currens fell outside 0-999 while computing its section."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Numerus currens {slug!r} is out of bounds (0-999)", slug)


class NoPathSet(ZettelError):
    """A handle was asked for its relative path but has none."""

    def __init__(self, link: str) -> None:
        super().__init__(f"The Zettel {link!r} has no path set", link)
