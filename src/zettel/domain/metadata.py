"""Metadata block parsing and rendering.

A Zettel file opens with a YAML metadata block, separated from the body
by the first blank line::

    title: On sharding
    tags: [ archive, layout ]

    Body text...

Only the block is ever decoded; the body is never parsed here.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

HEADER_SEPARATOR = "\n\n"


class MetadataDecodeError(ValueError):
    """The metadata block is not a valid YAML mapping."""


def _new_yaml() -> YAML:
    """Create a fresh safe YAML loader.

    ruamel.yaml's YAML object is stateful, so one per call.
    """
    return YAML(typ="safe", pure=True)


def split_header(content: str) -> str:
    """Return the metadata block of *content* (everything before the first blank line)."""
    normalized = content.replace("\r\n", "\n")
    return normalized.split(HEADER_SEPARATOR, 1)[0]


def parse_metadata(text: str) -> dict[str, Any]:
    """Decode a metadata block into a dict.

    An empty block decodes to ``{}``.

    Raises:
        MetadataDecodeError: If the block is not valid YAML, holds a scalar
            that cannot be constructed, or its top level is not a mapping.
    """
    try:
        data = _new_yaml().load(text)
    except (YAMLError, ValueError) as exc:
        raise MetadataDecodeError(str(exc)) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"expected a mapping, got {type(data).__name__}"
        raise MetadataDecodeError(msg)
    return data


def _render_value(value: Any) -> str:
    if isinstance(value, list | tuple):
        return "[ " + ", ".join(str(v) for v in value) + " ]"
    return str(value)


def render_metadata(metadata: Mapping[str, Any]) -> str:
    """Render *metadata* as a block, sequences in padded inline style.

    Examples:
        >>> print(render_metadata({"title": "Sharding", "tags": ["a", "b"]}), end="")
        title: Sharding
        tags: [ a, b ]
    """
    return "".join(f"{key}: {_render_value(val)}\n" for key, val in metadata.items())
