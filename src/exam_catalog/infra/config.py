"""Environment-driven settings for the HTTP service and local storage."""

from __future__ import annotations

import os
from pathlib import Path


def data_dir() -> Path:
    return Path(os.getenv("EXAM_DATA_DIR", "data"))


def metadata_path() -> Path:
    path = os.getenv("EXAM_METADATA_PATH")
    return Path(path) if path else data_dir() / "metadata.json"


def upload_dir() -> Path:
    path = os.getenv("EXAM_UPLOAD_DIR")
    return Path(path) if path else data_dir() / "uploads"


def favorites_database_url() -> str:
    url = os.getenv("FAVORITES_DATABASE_URL")

    if not url:
        return f"sqlite:///{data_dir() / 'favorites.db'}"

    return url
