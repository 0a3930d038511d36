from semantic_primes import discover_primes
from semantic_primes.reference.nsm import NSM_PRIMES, check_reference, coverage


def test_table_shape():
    names = [p.prime for p in NSM_PRIMES]
    assert len(names) == len(set(names)) == 64
    assert all(p.search_terms for p in NSM_PRIMES)


def test_check_reference_statuses(toy_corpus):
    result = discover_primes(toy_corpus)
    hits = {(hit.prime, hit.term): hit for hit in check_reference(result)}

    found = hits[("SOMETHING", "thing")]
    assert found.status == "found"
    assert found.score is not None
    assert found.scc_size == 2

    assert hits[("BODY", "body")].status == "not_in_cycle"
    assert hits[("YOU", "you")].status == "not_in_graph"
    assert hits[("YOU", "you")].score is None


def test_coverage_counts_primes_not_terms(toy_corpus):
    summary = coverage(check_reference(discover_primes(toy_corpus)))
    assert summary == {"primes": 64, "found": 1, "missing": 63}
