"""Shared pytest fixtures and test helpers for zettel tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from zettel.config.models import ArchiveConfig
from zettel.infrastructure.archive import Zettelkasten
from zettel.services.resolver import Resolver


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's archive configuration out of tests."""
    for var in ("ZETTEL_DIR", "ZETTEL_CONFIG", "ZETTEL_ROOT", "ZETTEL_EXT", "ZETTEL_KAESTEN"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def archive_root(tmp_path: Path) -> Path:
    """Temporary archive directory with the default kasten layout.

    This is the single source of truth for the on-disk archive layout.
    All archive fixtures (archive, resolver) build on this.
    """
    root = tmp_path / "Zettel"
    for kasten in ("main", "limbo", "tech", "writing"):
        (root / kasten).mkdir(parents=True)
    (root / "main" / "000-099").mkdir()
    return root


@pytest.fixture
def archive(archive_root: Path) -> Zettelkasten:
    """Registry over :func:`archive_root` with default kasten and ``.txt``."""
    return Zettelkasten(ArchiveConfig(root=archive_root))


@pytest.fixture
def resolver(archive: Zettelkasten) -> Resolver:
    return Resolver(archive)


@pytest.fixture
def fake_archive() -> Zettelkasten:
    """Registry rooted at ``/archive``; nothing exists on disk."""
    return Zettelkasten(ArchiveConfig(root=Path("/archive")))


@pytest.fixture
def fake_resolver(fake_archive: Zettelkasten) -> Resolver:
    return Resolver(fake_archive)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def _write_zettel(path: Path, header: str, body: str = "Body text.\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"{header.rstrip()}\n\n{body}", encoding="utf-8")
    return path


@pytest.fixture
def write_zettel() -> Callable[..., Path]:
    """Write a Zettel file: ``write_zettel(path, header, body=...)``."""
    return _write_zettel
