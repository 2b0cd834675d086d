from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from ..matching.models import Candidate

REQUIRED_COLUMNS: list[str] = ["id", "description"]


def _cell(value: Any) -> str | None:
    if pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def load_candidates(path: Path) -> list[Candidate]:
    """
    Read catalog rows from ``path``.

    The CSV needs ``id`` and ``description`` columns; ``title`` is optional.
    Empty cells become ``None`` so those rows are skipped by the matcher.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=True)

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Catalog {path} is missing columns: {', '.join(missing)}")

    has_title = "title" in df.columns
    candidates: list[Candidate] = []
    for _, row in df.iterrows():
        candidates.append(Candidate(
            id=str(row["id"]),
            description=_cell(row["description"]),
            title=_cell(row["title"]) if has_title else None,
        ))
    return candidates
