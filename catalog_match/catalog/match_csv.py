"""
Match free-text queries against a catalog CSV.

Usage:
    python -m catalog_match.catalog.match_csv catalog.csv "cat on a beach" "dog in a park"
"""
from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from ..embeddings.client import EmbeddingClient, build_embedding_client
from ..matching.config import DEFAULT_MATCH_CONFIG
from ..matching.engine import MatchEngine
from ..matching.models import MatchResult
from .loader import load_candidates


def _format_line(query: str, match: MatchResult | None) -> str:
    if match is None:
        return f"{query!r} -> no match"
    return f"{query!r} -> {match.item.id} ({match.similarity:.4f})"


async def run_match(
    catalog_path: Path,
    queries: list[str],
    client: EmbeddingClient,
    threshold: float = DEFAULT_MATCH_CONFIG.threshold,
    use_title_fallback: bool = DEFAULT_MATCH_CONFIG.use_title_fallback,
) -> list[str]:
    candidates = load_candidates(catalog_path)
    engine = MatchEngine(client, threshold=threshold, use_title_fallback=use_title_fallback)
    matches = await engine.find_best_matches(queries, candidates)
    return [_format_line(query, match) for query, match in matches.items()]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("catalog", type=Path, help="CSV with id, description and optional title columns")
    parser.add_argument("queries", nargs="+", help="free-text queries to match")
    parser.add_argument("--threshold", type=float, default=DEFAULT_MATCH_CONFIG.threshold)
    parser.add_argument("--use-title", action="store_true", help="match on title when description is empty")
    args = parser.parse_args(argv)

    client = build_embedding_client()
    print(f"Matching {len(args.queries)} queries against {args.catalog} ...")
    lines = asyncio.run(run_match(
        args.catalog,
        args.queries,
        client,
        threshold=args.threshold,
        use_title_fallback=args.use_title,
    ))
    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
