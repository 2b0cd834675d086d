from __future__ import annotations

import asyncio
import logging
import threading

from sentence_transformers import SentenceTransformer

from ..exceptions import EmbeddingProviderError
from .config import DEFAULT_EMBEDDING_CONFIG, EmbeddingConfig

logger = logging.getLogger(__name__)


class SentenceTransformerEmbeddingClient:
    """Embedding client running a sentence-transformer model in-process.

    ``SentenceTransformer.encode`` returns rows in input order, so no
    re-sorting is needed. The model is loaded on first use.
    """

    def __init__(self, config: EmbeddingConfig = DEFAULT_EMBEDDING_CONFIG) -> None:
        self.config = config
        self._model: SentenceTransformer | None = None
        self._model_lock = threading.Lock()

    @property
    def model_name(self) -> str:
        return self.config.local_model_name

    def _get_model(self) -> SentenceTransformer:
        with self._model_lock:
            if self._model is None:
                self._model = SentenceTransformer(self.config.local_model_name)
            return self._model

    def _encode(self, texts: list[str]) -> list[list[float]]:
        model = self._get_model()
        embeddings = model.encode(texts, show_progress_bar=False, batch_size=256)
        return [[float(x) for x in row] for row in embeddings]

    async def embed(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []

        logger.debug("Encoding %d texts with %s", len(texts), self.config.local_model_name)
        try:
            vectors = await asyncio.to_thread(self._encode, texts)
        except Exception as exc:
            logger.warning("Local embedding failed", exc_info=True)
            raise EmbeddingProviderError(str(exc), cause=exc) from exc

        if len(vectors) != len(texts):
            raise EmbeddingProviderError(
                f"Encoder returned {len(vectors)} vectors for {len(texts)} texts"
            )
        return vectors
