from __future__ import annotations

from pathlib import Path

import pytest

from exam_catalog.infra.config import (
    data_dir,
    favorites_database_url,
    metadata_path,
    upload_dir,
)
from exam_catalog.infra.db.session import build_engine


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("EXAM_DATA_DIR", "EXAM_METADATA_PATH", "EXAM_UPLOAD_DIR", "FAVORITES_DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    assert data_dir() == Path("data")
    assert metadata_path() == Path("data") / "metadata.json"
    assert upload_dir() == Path("data") / "uploads"
    assert favorites_database_url() == f"sqlite:///{Path('data') / 'favorites.db'}"


def test_paths_follow_data_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAM_DATA_DIR", "/srv/exams")

    assert metadata_path() == Path("/srv/exams/metadata.json")
    assert upload_dir() == Path("/srv/exams/uploads")


def test_explicit_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAM_METADATA_PATH", "/tmp/catalog.json")
    monkeypatch.setenv("EXAM_UPLOAD_DIR", "/tmp/files")
    monkeypatch.setenv("FAVORITES_DATABASE_URL", "postgresql://u:p@db/favorites")

    assert metadata_path() == Path("/tmp/catalog.json")
    assert upload_dir() == Path("/tmp/files")
    assert favorites_database_url() == "postgresql://u:p@db/favorites"


def test_sqlite_engine_creates_parent_directory(tmp_path: Path) -> None:
    database = tmp_path / "nested" / "favorites.db"

    engine = build_engine(f"sqlite:///{database}")

    assert database.parent.is_dir()
    assert engine.dialect.name == "sqlite"
