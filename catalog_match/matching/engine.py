from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ..embeddings.client import EmbeddingClient
from ..exceptions import EmbeddingProviderError
from .config import DEFAULT_MATCH_CONFIG, MatchConfig
from .models import MatchResult
from .similarity import cosine_similarity

logger = logging.getLogger(__name__)


def _field(candidate: Any, name: str) -> Any:
    if isinstance(candidate, Mapping):
        return candidate.get(name)
    return getattr(candidate, name, None)


def _candidate_text(candidate: Any, use_title_fallback: bool) -> str | None:
    """Text to embed for a candidate: its description, else (optionally) its title."""
    description = _field(candidate, "description")
    if description:
        return str(description)
    if use_title_fallback:
        title = _field(candidate, "title")
        if title:
            return str(title)
    return None


async def _embed_batch(client: EmbeddingClient, texts: list[str]) -> list[list[float]]:
    embeddings = await client.embed(texts)
    if len(embeddings) != len(texts):
        raise EmbeddingProviderError(
            f"Embedding client returned {len(embeddings)} vectors for {len(texts)} texts"
        )
    return embeddings


def _best_match(
    query_vector: list[float],
    candidate_vectors: list[list[float]],
    candidates: list[Any],
    threshold: float,
) -> MatchResult | None:
    best: MatchResult | None = None
    for candidate, vector in zip(candidates, candidate_vectors):
        similarity = cosine_similarity(query_vector, vector)
        if similarity < threshold:
            continue
        # Strictly greater: on ties the earlier candidate wins
        if best is None or similarity > best.similarity:
            best = MatchResult(item=candidate, similarity=similarity)
    return best


class MatchEngine:
    """
    Finds which candidate a free-text query most plausibly refers to.

    Holds only its configuration and the injected embedding client; every call
    is independent. Each call costs at most one embedding request, however many
    queries and candidates take part. Queries do not compete for candidates:
    the same candidate may be the best match for several queries.

    Candidates whose description is ``None`` or ``""`` are never embedded or
    selected. Any other string, whitespace included, is matched as given.
    """

    def __init__(
        self,
        client: EmbeddingClient,
        threshold: float = DEFAULT_MATCH_CONFIG.threshold,
        use_title_fallback: bool = False,
    ) -> None:
        self.client = client
        self.threshold = threshold
        self.use_title_fallback = use_title_fallback

    @classmethod
    def from_config(
        cls,
        client: EmbeddingClient,
        config: MatchConfig = DEFAULT_MATCH_CONFIG,
    ) -> "MatchEngine":
        return cls(
            client,
            threshold=config.threshold,
            use_title_fallback=config.use_title_fallback,
        )

    def _valid_candidates(self, candidates: Sequence[Any]) -> tuple[list[Any], list[str]]:
        valid: list[Any] = []
        texts: list[str] = []
        for candidate in candidates:
            text = _candidate_text(candidate, self.use_title_fallback)
            if text is None:
                continue
            valid.append(candidate)
            texts.append(text)
        skipped = len(candidates) - len(valid)
        if skipped:
            logger.debug("Skipping %d candidates without text", skipped)
        return valid, texts

    async def find_best_match(
        self,
        query: str,
        candidates: Sequence[Any],
        threshold: float | None = None,
    ) -> MatchResult | None:
        """
        Return the candidate most similar to ``query``, or ``None``.

        Only candidates scoring at least ``threshold`` (the engine default when
        omitted) are eligible.
        """
        threshold = self.threshold if threshold is None else threshold

        valid, texts = self._valid_candidates(candidates)
        if not valid:
            return None

        embeddings = await _embed_batch(self.client, [query, *texts])
        query_vector = embeddings[0]
        candidate_vectors = embeddings[1:]

        return _best_match(query_vector, candidate_vectors, valid, threshold)

    async def find_best_matches(
        self,
        queries: Sequence[str],
        candidates: Sequence[Any],
        threshold: float | None = None,
    ) -> dict[str, MatchResult | None]:
        """
        Match several queries against the same candidates in one embedding call.

        Returns a dict keyed by query string, in input order; a query with no
        candidate at or above ``threshold`` maps to ``None``.
        """
        threshold = self.threshold if threshold is None else threshold

        valid, texts = self._valid_candidates(candidates)
        if not valid:
            return {query: None for query in queries}
        if not queries:
            return {}

        logger.debug("Matching %d queries against %d candidates", len(queries), len(valid))
        embeddings = await _embed_batch(self.client, [*queries, *texts])
        query_vectors = embeddings[: len(queries)]
        candidate_vectors = embeddings[len(queries):]

        results: dict[str, MatchResult | None] = {}
        for query, query_vector in zip(queries, query_vectors):
            results[query] = _best_match(query_vector, candidate_vectors, valid, threshold)
        return results


async def find_best_match(
    client: EmbeddingClient,
    query: str,
    candidates: Sequence[Any],
    threshold: float = DEFAULT_MATCH_CONFIG.threshold,
) -> MatchResult | None:
    return await MatchEngine(client, threshold=threshold).find_best_match(query, candidates)


async def find_best_matches(
    client: EmbeddingClient,
    queries: Sequence[str],
    candidates: Sequence[Any],
    threshold: float = DEFAULT_MATCH_CONFIG.threshold,
) -> dict[str, MatchResult | None]:
    return await MatchEngine(client, threshold=threshold).find_best_matches(queries, candidates)
