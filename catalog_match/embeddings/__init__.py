"""
Embeddings layer for semantic matching.

Responsibilities:
- Call a text-embedding provider (OpenAI remotely, or a local sentence-transformer).
- Return one vector per input string, in input order.
- Surface every provider failure as ``EmbeddingProviderError``.
"""
