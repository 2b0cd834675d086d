from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

# Low enough to accept loose paraphrases of short descriptions
MATCH_THRESHOLD = 0.4


@dataclass(frozen=True)
class MatchConfig:
    threshold: float = float(os.getenv("MATCH_THRESHOLD", MATCH_THRESHOLD))
    use_title_fallback: bool = False


DEFAULT_MATCH_CONFIG = MatchConfig()
