"""Natural Semantic Metalanguage primes as a reference checklist.

The table lists the primes proposed by Wierzbicka and Goddard with the
English words used to look them up. It is reporting data only and plays no
part in discovery.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from ..pipeline import DiscoveryResult

Status = Literal["found", "not_in_cycle", "not_in_graph"]


@dataclass(frozen=True, slots=True)
class ReferencePrime:
    prime: str
    category: str
    search_terms: tuple[str, ...]
    allolexes: tuple[str, ...] = ()


def _p(prime: str, category: str, terms: str, allolexes: str = "") -> ReferencePrime:
    return ReferencePrime(prime, category, tuple(terms.split()), tuple(filter(None, allolexes.split(","))))


NSM_PRIMES: tuple[ReferencePrime, ...] = (
    _p("I", "substantives", "i me self", "ME"),
    _p("YOU", "substantives", "you"),
    _p("SOMEONE", "substantives", "someone person somebody", "PERSON"),
    _p("PEOPLE", "substantives", "people persons"),
    _p("SOMETHING", "substantives", "something thing", "THING"),
    _p("BODY", "substantives", "body"),
    _p("KIND", "relational_substantives", "kind sort type", "SORT"),
    _p("PART", "relational_substantives", "part"),
    _p("THIS", "determiners", "this"),
    _p("THE SAME", "determiners", "same identical"),
    _p("OTHER", "determiners", "other else another", "ELSE"),
    _p("ONE", "quantifiers", "one"),
    _p("TWO", "quantifiers", "two"),
    _p("SOME", "quantifiers", "some"),
    _p("ALL", "quantifiers", "all every"),
    _p("MUCH", "quantifiers", "much many", "MANY"),
    _p("LITTLE", "quantifiers", "little few", "FEW"),
    _p("GOOD", "evaluators", "good"),
    _p("BAD", "evaluators", "bad"),
    _p("BIG", "descriptors", "big large", "LARGE"),
    _p("SMALL", "descriptors", "small little"),
    _p("THINK", "mental_predicates", "think"),
    _p("KNOW", "mental_predicates", "know"),
    _p("WANT", "mental_predicates", "want"),
    _p("FEEL", "mental_predicates", "feel"),
    _p("SEE", "mental_predicates", "see"),
    _p("HEAR", "mental_predicates", "hear"),
    _p("SAY", "speech", "say"),
    _p("WORDS", "speech", "word words"),
    _p("TRUE", "speech", "true truth"),
    _p("DO", "actions_events_movement", "do"),
    _p("HAPPEN", "actions_events_movement", "happen occur"),
    _p("MOVE", "actions_events_movement", "move"),
    _p("BE (SOMEWHERE)", "location_existence_specification", "be exist located", "BE AT"),
    _p("THERE IS", "location_existence_specification", "exist existence", "EXIST"),
    _p("BE (SOMEONE/SOMETHING)", "location_existence_specification", "be being"),
    _p("MINE", "possession", "have possess own", "HAVE"),
    _p("LIVE", "life_and_death", "live alive life"),
    _p("DIE", "life_and_death", "die death"),
    _p("WHEN", "time", "when time", "TIME"),
    _p("NOW", "time", "now present"),
    _p("BEFORE", "time", "before"),
    _p("AFTER", "time", "after"),
    _p("A LONG TIME", "time", "long"),
    _p("A SHORT TIME", "time", "short brief"),
    _p("FOR SOME TIME", "time", "while duration"),
    _p("MOMENT", "time", "moment instant", "INSTANT"),
    _p("WHERE", "space", "where place", "PLACE"),
    _p("HERE", "space", "here"),
    _p("ABOVE", "space", "above over"),
    _p("BELOW", "space", "below under"),
    _p("FAR", "space", "far distant"),
    _p("NEAR", "space", "near close", "CLOSE"),
    _p("SIDE", "space", "side"),
    _p("INSIDE", "space", "inside within"),
    _p("TOUCH", "space", "touch contact", "CONTACT"),
    _p("NOT", "logical_concepts", "not negation"),
    _p("MAYBE", "logical_concepts", "maybe perhaps possible", "PERHAPS"),
    _p("CAN", "logical_concepts", "can able possible", "POSSIBLE"),
    _p("BECAUSE", "logical_concepts", "because cause"),
    _p("IF", "logical_concepts", "if condition"),
    _p("VERY", "intensifier_augmentor", "very extremely"),
    _p("MORE", "intensifier_augmentor", "more"),
    _p("LIKE", "similarity", "like similar way", "AS,WAY"),
)


@dataclass(frozen=True, slots=True)
class ReferenceHit:
    prime: str
    category: str
    term: str
    status: Status
    score: float | None = None
    scc_size: int = 0


def check_reference(
    result: "DiscoveryResult", primes: tuple[ReferencePrime, ...] = NSM_PRIMES
) -> list[ReferenceHit]:
    """Report, for every search term, how discovery classified that word."""

    scores = {record.word: record.score for record in result.records}
    hits: list[ReferenceHit] = []
    for prime in primes:
        for term in prime.search_terms:
            if term in scores:
                status: Status = "found"
            elif term in result.graph:
                status = "not_in_cycle"
            else:
                status = "not_in_graph"
            hits.append(
                ReferenceHit(
                    prime=prime.prime,
                    category=prime.category,
                    term=term,
                    status=status,
                    score=scores.get(term),
                    scc_size=result.assignment.size(term),
                )
            )
    return hits


def coverage(hits: list[ReferenceHit]) -> dict[str, int]:
    """Count primes with at least one discovered search term."""

    found = {hit.prime for hit in hits if hit.status == "found"}
    total = {hit.prime for hit in hits}
    return {"primes": len(total), "found": len(found), "missing": len(total - found)}


__all__ = ["NSM_PRIMES", "ReferenceHit", "ReferencePrime", "check_reference", "coverage"]
