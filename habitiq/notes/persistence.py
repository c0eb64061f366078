"""Reading and writing the note blob (a JSON array of camelCase notes)."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from habitiq.config import get_settings

logger = logging.getLogger(__name__)


def get_notes_path() -> Path:
    """Get path to the notes blob (``<data_dir>/<storage_key>.json``)."""
    settings = get_settings()
    return Path(settings.data_dir) / f"{settings.storage_key}.json"


def read_notes_blob(file_path: Path):
    """Raw blob contents; a blob that was never written reads as no notes."""
    if not file_path.exists():
        return []
    with open(file_path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_notes_blob(file_path: Path, items: list[dict]) -> None:
    """Write the blob through a temp file that replaces the old one."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = file_path.with_name(file_path.name + ".tmp")
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(items, f, indent=2, ensure_ascii=False)
    tmp_path.replace(file_path)
    logger.debug(f"Wrote {len(items)} notes to {file_path}")
