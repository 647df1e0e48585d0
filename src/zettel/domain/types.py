"""Identifier variants.

A Zettel is named by exactly one of two schemes. Numerus currens
Zettel live only in the ``main`` kasten; Tempus Zettel live in every
other kasten.
"""

from __future__ import annotations

from enum import StrEnum

MAIN_KASTEN = "main"


class ZettelType(StrEnum):
    """The two mutually exclusive identifier schemes."""

    NUMERUS = "numerus"
    TEMPUS = "tempus"
