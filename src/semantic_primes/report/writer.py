"""Render ranked prime records as Links Notation or a JSON payload."""
from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ..scoring.primes import PrimeRecord
from ..utils.stats import score_summary, size_distribution
from ..utils.text import utcnow_iso

if TYPE_CHECKING:
    from ..pipeline import DiscoveryResult

DEFINITION_PREVIEW = 200
SAMPLE_PREVIEW = 5

# (key, heading, lower bound inclusive, upper bound exclusive)
CONFIDENCE_BANDS: tuple[tuple[str, str, float, float], ...] = (
    ("high", "HIGH CONFIDENCE PRIMES (score >= 80)", 80.0, float("inf")),
    ("medium", "MEDIUM CONFIDENCE PRIMES (50 <= score < 80)", 50.0, 80.0),
    ("lower", "LOWER CONFIDENCE PRIMES (30 <= score < 50)", 30.0, 50.0),
    ("candidate", "CANDIDATES (score < 30)", float("-inf"), 30.0),
)

_ID_RE = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def escape_lino(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def lino_id(word: str) -> str:
    return _ID_RE.sub("_", word)


def confidence_band(score: float) -> str:
    for key, _heading, low, high in CONFIDENCE_BANDS:
        if low <= score < high:
            return key
    return CONFIDENCE_BANDS[-1][0]


def _record_lines(record: PrimeRecord) -> list[str]:
    wid = lino_id(record.word)
    lines = [
        f"({wid} isa discovered_semantic_prime)",
        f"({wid} prime_score {record.score:.1f})",
    ]
    if record.is_in_cycle:
        lines.append(f"({wid} in_circular_definition true)")
    if record.scc_size > 1:
        lines.append(f"({wid} scc_size {record.scc_size})")
    if record.has_self_loop:
        lines.append(f"({wid} has_self_loop true)")
    if record.reference_count:
        lines.append(f"({wid} reference_count {record.reference_count})")
    if record.is_self_reference:
        lines.append(f"({wid} has_self_reference true)")
    if record.definition:
        lines.append(f'({wid} definition "{escape_lino(record.definition[:DEFINITION_PREVIEW])}")')
    if record.part_of_speech:
        lines.append(f"({wid} pos {record.part_of_speech})")
    if len(record.scc_sample) > 1:
        sample = ", ".join(record.scc_sample[:SAMPLE_PREVIEW])
        lines.append(f'({wid} scc_sample "{escape_lino(sample)}")')
    lines.append("")
    return lines


def to_links_notation(records: Sequence[PrimeRecord], *, generated: str | None = None) -> str:
    """Render *records* grouped by confidence band, preserving their order."""

    lines = [
        "// Semantic primes discovered from circular definition chains",
        "// Method: strongly connected components of the word dependency graph",
        "//",
        "// Words in the same component can all reach each other through their",
        "// definitions; a word defined in terms of itself is circular on its own.",
        "//",
        f"// Generated: {generated or utcnow_iso()}",
        f"// Total semantic primes discovered: {len(records)}",
        "",
    ]

    for key, heading, low, high in CONFIDENCE_BANDS:
        band = [r for r in records if low <= r.score < high]
        if not band and key == "candidate":
            continue
        lines.append(f"// === {heading} ===")
        lines.append(f"// Count: {len(band)}")
        lines.append("")
        for record in band:
            lines.extend(_record_lines(record))
        lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n"


def summarize(result: "DiscoveryResult") -> dict[str, Any]:
    """Aggregate graph, component and score statistics for a discovery run."""

    non_trivial = result.assignment.non_trivial()
    return {
        "lines": result.line_count,
        "concept_sets": result.concept_set_count,
        "lemmas": len(result.index),
        "self_references": len(result.index.self_references),
        "graph_nodes": len(result.graph),
        "graph_edges": result.graph.edge_count,
        "self_loops": len(result.graph.self_loops),
        "components": len(result.assignment.components),
        "non_trivial_components": size_distribution([len(c) for c in non_trivial]),
        "component_sizes": {str(k): v for k, v in result.assignment.size_histogram().items()},
        "primes": len(result.records),
        "scores": score_summary([r.score for r in result.records]),
        "timings": {k: round(v, 3) for k, v in result.timings.items()},
    }


def to_json_payload(result: "DiscoveryResult", *, top: int | None = None) -> dict[str, Any]:
    """Return summary plus records; absent optional fields are omitted."""

    records = result.records if top is None else result.records[:top]
    return {
        "generated": utcnow_iso(),
        "summary": summarize(result),
        "primes": [
            {**record.model_dump(exclude_none=True), "confidence": confidence_band(record.score)}
            for record in records
        ],
    }


__all__ = [
    "CONFIDENCE_BANDS",
    "confidence_band",
    "escape_lino",
    "lino_id",
    "summarize",
    "to_json_payload",
    "to_links_notation",
]
