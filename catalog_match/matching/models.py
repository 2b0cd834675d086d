from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Candidate(BaseModel):
    id: Any
    description: str | None = None
    title: str | None = None


class MatchResult(BaseModel):
    """The chosen candidate (the caller's own object) and its similarity."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    item: Any
    similarity: float
