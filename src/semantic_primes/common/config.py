from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..scoring.weights import ScoringWeights

logger = logging.getLogger(__name__)

DATA_DIR_ENV = "SEMANTIC_PRIMES_DATA_DIR"
VERBOSE_ENV = "SEMANTIC_PRIMES_VERBOSE"

# Function words that may optionally be excluded from analysis. Discovery uses
# no stop words unless asked to.
DEFAULT_STOP_WORDS: frozenset[str] = frozenset(
    {
        "a", "an", "the", "is", "are", "was", "were", "be", "been", "being",
        "have", "has", "had", "do", "does", "did", "will", "would", "could", "should",
        "may", "might", "must", "shall", "can", "need", "dare", "ought", "used",
        "to", "of", "in", "for", "on", "with", "at", "by", "from", "up", "about",
        "into", "over", "after", "and", "but", "or", "if", "as", "that", "which",
        "what", "when", "where", "who", "whom", "this", "these", "those", "such",
        "it", "its", "itself", "they", "their", "them", "we", "our", "us",
        "he", "his", "him", "she", "her", "hers", "you", "your", "yours",
        "i", "me", "my", "mine", "myself",
        "not", "no", "nor", "so", "than", "too", "very", "just", "only",
        "also", "even", "still", "already", "always", "never", "ever", "often",
        "any", "all", "each", "every", "both", "few", "more", "most", "other",
        "some", "one", "two", "first", "new", "now", "way", "well", "then",
        "usually", "especially", "particularly", "generally", "typically",
        "sometimes", "followed", "something", "someone", "anything", "anyone",
    }
)


def get_config_paths() -> dict[str, Path]:
    """Return canonical on-disk locations for the corpus and discovery artifacts."""

    data_dir = Path(os.environ.get(DATA_DIR_ENV) or "data")

    return {
        "data_dir": data_dir,
        "corpus": data_dir / "english-wordnet-2024.xml",
        "primes_lino": data_dir / "discovered-primes.lino",
        "primes_json": data_dir / "discovered-primes.json",
    }


def env_flag(name: str) -> bool:
    return (os.environ.get(name) or "").strip().lower() in {"1", "true", "yes", "on"}


def _normalize_words(words: Iterable[str]) -> frozenset[str]:
    return frozenset(w.strip().lower() for w in words if w and w.strip())


def load_stop_words(path: str | Path) -> frozenset[str]:
    """Read a stop-word file: one word per line, ``#`` starts a comment line."""

    path = Path(path)
    if not path.exists() or not path.is_file():
        raise FileNotFoundError(f"Stop words file '{path}' does not exist or is not a file")

    with path.open("r", encoding="utf-8") as handle:
        words = _normalize_words(
            line for line in handle if not line.strip().startswith("#")
        )
    logger.info("Loaded stop words", extra={"path": str(path), "count": len(words)})
    return words


class DiscoveryConfig(BaseModel):
    """Knobs consumed by content-word extraction and prime scoring."""

    model_config = ConfigDict(frozen=True)

    stop_words: frozenset[str] = Field(default_factory=frozenset)
    min_word_length: int = 3
    sample_size: int = 10
    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    show_progress: bool = False

    @field_validator("stop_words", mode="before")
    def normalize_stop_words(cls, v: Iterable[str] | None) -> frozenset[str]:
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = [v]
        return _normalize_words(v)

    @field_validator("min_word_length", "sample_size", mode="after")
    def check_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"expected a positive integer, got {v}")
        return v


__all__ = [
    "DATA_DIR_ENV",
    "DEFAULT_STOP_WORDS",
    "DiscoveryConfig",
    "VERBOSE_ENV",
    "env_flag",
    "get_config_paths",
    "load_stop_words",
]
