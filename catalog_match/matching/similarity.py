from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from ..exceptions import DimensionMismatch


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine of the angle between ``a`` and ``b``, in [-1, 1].

    Returns 0.0 when either vector has zero magnitude. Raises
    ``DimensionMismatch`` if the lengths differ.
    """
    if len(a) != len(b):
        raise DimensionMismatch(len(a), len(b))

    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)

    magnitude = float(np.linalg.norm(va)) * float(np.linalg.norm(vb))
    if magnitude == 0.0:
        return 0.0

    return float(np.dot(va, vb)) / magnitude
