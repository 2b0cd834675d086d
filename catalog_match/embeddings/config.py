from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class EmbeddingConfig:
    provider: str = os.getenv("EMBEDDING_PROVIDER", "openai")
    api_key: str = os.getenv("OPENAI_API_KEY", "")
    # Small, fast, good for short text matching
    model: str = os.getenv("EMBEDDING_MODEL", "text-embedding-3-small")
    local_model_name: str = "all-MiniLM-L6-v2"
    timeout: float = 10.0


DEFAULT_EMBEDDING_CONFIG = EmbeddingConfig()
