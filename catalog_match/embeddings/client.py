from __future__ import annotations

from typing import Protocol

from ..exceptions import ConfigurationError
from .config import DEFAULT_EMBEDDING_CONFIG, EmbeddingConfig


class EmbeddingClient(Protocol):
    """
    Turns an ordered list of strings into an ordered list of vectors.

    ``embed(texts)[i]`` is the embedding of ``texts[i]``; every vector returned by
    one call has the same length. An empty list yields an empty list. Provider
    failures are raised as ``EmbeddingProviderError`` and never retried.
    """

    async def embed(self, texts: list[str]) -> list[list[float]]: ...


async def embed_text(client: EmbeddingClient, text: str) -> list[float]:
    """Embed a single string."""
    vectors = await client.embed([text])
    return vectors[0]


def build_embedding_client(config: EmbeddingConfig = DEFAULT_EMBEDDING_CONFIG) -> EmbeddingClient:
    """Construct the embedding client selected by ``config.provider``."""
    if config.provider == "openai":
        from .openai_client import OpenAIEmbeddingClient

        return OpenAIEmbeddingClient(config)
    if config.provider == "local":
        from .local_encoder import SentenceTransformerEmbeddingClient

        return SentenceTransformerEmbeddingClient(config)
    raise ConfigurationError(f"Unknown embedding provider: {config.provider!r}")
