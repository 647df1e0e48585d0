"""Unified settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs   — passed by the embedding program
  2. ``ZETTEL_DIR`` — the archive root
  3. Env vars      — ``ZETTEL_*`` prefix (``ZETTEL_EXT``, ``ZETTEL_KAESTEN``)
  4. TOML file     — ``[archive]`` table of ``zettel.toml`` discovered via walk-up
  5. Code defaults — baked into :class:`ArchiveConfig`

Uses Pydantic Settings v2 with custom sources for the TOML file and the
``ZETTEL_DIR`` root variable.

``ZETTEL_KAESTEN`` is a complex field, so pydantic-settings decodes it as
JSON: ``ZETTEL_KAESTEN='["main", "tech"]'``. A comma-separated value
such as ``main,tech`` fails validation.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from zettel.config.discovery import find_config, read_archive_section
from zettel.config.models import DEFAULT_EXT, DEFAULT_KAESTEN, DEFAULT_ROOT, ArchiveConfig

ROOT_ENV_VAR = "ZETTEL_DIR"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read the ``[archive]`` table from a discovered ``zettel.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_archive_section(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class RootEnvSource(PydanticBaseSettingsSource):
    """Map ``ZETTEL_DIR`` onto the ``root`` field."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = os.environ.get(ROOT_ENV_VAR) if field_name == "root" else None
        return val, field_name, False

    def __call__(self) -> dict[str, Any]:
        val = os.environ.get(ROOT_ENV_VAR)
        return {"root": val} if val else {}


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ZettelSettings(BaseSettings):
    """Settings for one process using the archive.

    Attributes:
        root: Archive root directory.
        kaesten: Configured kasten names; ``main`` is mandatory. Given as a
            JSON array when set through ``ZETTEL_KAESTEN``.
        ext: File extension of Zettel files.
        config_path: The ``zettel.toml`` that was read, if any.
        verbose: Enable DEBUG logging for the ``zettel`` logger.
        log_json: Emit JSON log lines instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ZETTEL_",
    }

    root: Path = DEFAULT_ROOT
    kaesten: tuple[str, ...] = DEFAULT_KAESTEN
    ext: str = DEFAULT_EXT
    config_path: Path | None = Field(default=None, exclude=True)

    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert ZETTEL_DIR ahead of prefixed env vars and TOML after them."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            RootEnvSource(settings_cls),
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> ZettelSettings:
        """Construct settings, discovering ``zettel.toml`` unless given.

        An explicit *config_path* that is not a file is ignored, as is a
        missing discovered file.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

    def archive_config(self) -> ArchiveConfig:
        """Return the frozen archive layout these settings describe."""
        return ArchiveConfig(root=self.root, kaesten=self.kaesten, ext=self.ext)
