from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from catalog_match.catalog.loader import load_candidates
from catalog_match.catalog.match_csv import run_match

CATALOG_CSV = """id,description,title
A,cat on a beach,Beach cat
B,dog in a park,
C,,Lonely title
"""


class CountingEmbeddingClient:
    def __init__(self, vectors: dict[str, list[float]]):
        self.vectors = vectors
        self.calls = 0

    async def embed(self, texts: list[str]) -> list[list[float]]:
        self.calls += 1
        return [self.vectors[t] for t in texts]


def _write_catalog(tmp_path: Path, content: str = CATALOG_CSV) -> Path:
    path = tmp_path / "catalog.csv"
    path.write_text(content)
    return path


def test_load_candidates_maps_empty_cells_to_none(tmp_path: Path):
    candidates = load_candidates(_write_catalog(tmp_path))

    assert [c.id for c in candidates] == ["A", "B", "C"]
    assert candidates[0].description == "cat on a beach"
    assert candidates[0].title == "Beach cat"
    assert candidates[1].title is None
    assert candidates[2].description is None
    assert candidates[2].title == "Lonely title"


def test_load_candidates_without_title_column(tmp_path: Path):
    path = _write_catalog(tmp_path, "id,description\n1,a red kite\n")

    candidates = load_candidates(path)

    assert candidates[0].id == "1"
    assert candidates[0].title is None


def test_load_candidates_rejects_missing_columns(tmp_path: Path):
    path = _write_catalog(tmp_path, "id,name\n1,foo\n")

    with pytest.raises(ValueError, match="description"):
        load_candidates(path)


def test_run_match_formats_one_line_per_query(tmp_path: Path):
    client = CountingEmbeddingClient({
        "beach cat": [1.0, 0.0],
        "park dog": [0.0, 1.0],
        "rocket": [-1.0, 0.0],
        "cat on a beach": [1.0, 0.0],
        "dog in a park": [0.0, 1.0],
    })

    lines = asyncio.run(run_match(
        _write_catalog(tmp_path), ["beach cat", "park dog", "rocket"], client, threshold=0.9,
    ))

    assert lines == [
        "'beach cat' -> A (1.0000)",
        "'park dog' -> B (1.0000)",
        "'rocket' -> no match",
    ]
    assert client.calls == 1


def test_run_match_with_title_fallback(tmp_path: Path):
    client = CountingEmbeddingClient({
        "lonely": [0.0, 1.0],
        "cat on a beach": [1.0, 0.0],
        "dog in a park": [1.0, 0.0],
        "Lonely title": [0.0, 1.0],
    })

    lines = asyncio.run(run_match(
        _write_catalog(tmp_path), ["lonely"], client, threshold=0.9, use_title_fallback=True,
    ))

    assert lines == ["'lonely' -> C (1.0000)"]
