from __future__ import annotations

import logging

from openai import AsyncOpenAI, OpenAIError

from ..exceptions import ConfigurationError, EmbeddingProviderError
from .config import DEFAULT_EMBEDDING_CONFIG, EmbeddingConfig

logger = logging.getLogger(__name__)


class OpenAIEmbeddingClient:
    """
    Embedding client backed by the OpenAI embeddings endpoint.

    The endpoint tags every returned item with the ``index`` of its input, and
    items are not guaranteed to arrive in submission order. ``embed`` re-sorts
    by that index, so callers always see input order.
    """

    def __init__(self, config: EmbeddingConfig = DEFAULT_EMBEDDING_CONFIG) -> None:
        if not config.api_key:
            raise ConfigurationError("Missing OPENAI_API_KEY")
        self.config = config
        # Retry policy belongs to the caller.
        self._client = AsyncOpenAI(
            api_key=config.api_key,
            timeout=config.timeout,
            max_retries=0,
        )

    @property
    def model_name(self) -> str:
        return self.config.model

    async def embed(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []

        logger.debug("Embedding %d texts with %s", len(texts), self.config.model)
        try:
            response = await self._client.embeddings.create(
                model=self.config.model,
                input=texts,
            )
        except OpenAIError as exc:
            logger.warning("OpenAI embedding request failed", exc_info=True)
            raise EmbeddingProviderError(str(exc), cause=exc) from exc

        return _restore_order(response.data, len(texts))


def _restore_order(items, expected: int) -> list[list[float]]:
    """Sort provider items by their ``index`` tag and check they cover the input."""
    ordered = sorted(items, key=lambda item: item.index)
    indices = [item.index for item in ordered]
    if indices != list(range(expected)):
        raise EmbeddingProviderError(
            f"Embedding response does not match input: expected {expected} items, "
            f"got indices {indices}"
        )
    return [list(item.embedding) for item in ordered]
