"""Bracketed link references inside Zettel text.

Zettel refer to each other by canonical link written in double brackets,
optionally followed by a label::

    See [[042-ab]] and [[tech:20240115T0930|the sharding note]].

Only the bracket syntax is recognised here; whether a target is a numerus
or tempus link is decided by the resolver.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_REFERENCE_PATTERN = re.compile(r"\[\[([^\[\]|]+)(?:\|([^\[\]]*))?\]\]")


@dataclass(frozen=True)
class LinkReference:
    """One ``[[target|label]]`` occurrence."""

    target: str
    label: str | None = None


def extract_links(text: str) -> list[LinkReference]:
    """Return the bracketed references in *text*, in order of appearance.

    Targets are stripped of surrounding whitespace but not validated, so
    ``[[Some Title]]`` yields a reference the resolver will not match.
    An empty label is treated as no label.
    """
    return [
        LinkReference(target=m.group(1).strip(), label=(m.group(2) or "").strip() or None)
        for m in _REFERENCE_PATTERN.finditer(text)
    ]
