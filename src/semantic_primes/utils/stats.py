"""Summary statistics over discovery output."""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np

DEFAULT_PERCENTILES: tuple[int, ...] = (10, 25, 50, 75, 90)


def score_summary(
    scores: Sequence[float], percentiles: Sequence[int] = DEFAULT_PERCENTILES
) -> dict[str, float]:
    """Return count, mean, min, max and percentiles of *scores*."""

    if not scores:
        return {"count": 0}

    values = np.asarray(scores, dtype=float)
    summary: dict[str, float] = {
        "count": int(values.size),
        "mean": round(float(values.mean()), 3),
        "min": round(float(values.min()), 3),
        "max": round(float(values.max()), 3),
    }
    for pct, value in zip(percentiles, np.percentile(values, percentiles)):
        summary[f"p{pct}"] = round(float(value), 3)
    return summary


def size_distribution(sizes: Sequence[int]) -> dict[str, float]:
    """Describe a list of component sizes."""

    if not sizes:
        return {"components": 0, "largest": 0, "mean_size": 0.0}
    values = np.asarray(sizes, dtype=np.int64)
    return {
        "components": int(values.size),
        "largest": int(values.max()),
        "mean_size": round(float(values.mean()), 3),
    }


__all__ = ["DEFAULT_PERCENTILES", "score_summary", "size_distribution"]
