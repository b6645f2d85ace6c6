"""
Integration test for the query service.

HOW TO RUN:
From the src directory, run:
    python -m query.test_service

Or from the project root:
    cd src; python -m query.test_service

The test parses the bundled sample ontology; no network access is needed.
"""

import asyncio
import random

from ontology.sample import build_sample_store

from .service import QueryService

CONCEPTS_QUERY = """# Random sample of fundamental concepts
SELECT ?concepto ?label
WHERE {
    ?concepto a progreval:Concepto-Fundamental .
    ?concepto rdfs:label ?label .
}
ORDER BY RAND()
LIMIT 2
"""


def test_prepare():
    """Test that modifiers come from the original text, which is otherwise left as written."""
    print("Testing query preparation...")

    service = QueryService(build_sample_store())
    normalized, modifiers = service.prepare(CONCEPTS_QUERY)

    assert modifiers.limit == 2
    assert modifiers.randomize is True
    assert normalized.startswith("PREFIX rdf:")
    assert "# Random sample" not in normalized
    assert normalized.rstrip().endswith("ORDER BY RAND()\nLIMIT 2")

    print("✓ Query prepared")


def test_run_random_limited_sample():
    """Test ORDER BY RAND() LIMIT 2 over the three concepts."""
    print("Testing random limited sample...")

    service = QueryService(build_sample_store(), rng=random.Random(3))
    outcome = asyncio.run(service.run(CONCEPTS_QUERY))

    assert outcome.succeeded, outcome.error
    assert outcome.result.variables == ["concepto", "label"]
    assert len(outcome.result) == 2
    labels = [row.get("label").value for row in outcome.result.rows]
    assert len(set(labels)) == 2
    assert set(labels) <= {"Variables", "Condicionales", "Bucles"}
    assert outcome.execution_time_ms >= 0

    print("✓ Random sample returned")


def test_run_without_modifiers():
    """Test a plain query relying on injected prefixes."""
    print("Testing plain query...")

    service = QueryService(build_sample_store())
    outcome = asyncio.run(service.run("SELECT ?a WHERE { ?a rdf:type progreval:Publico-Objetivo }"))

    assert outcome.succeeded
    assert outcome.modifiers.is_empty
    assert len(outcome.result) == 2

    print("✓ Plain query returned all rows")


def test_run_reports_errors():
    """Test that compile errors are reported in the outcome, not raised."""
    print("Testing error reporting...")

    service = QueryService(build_sample_store())
    outcome = asyncio.run(service.run("SELECT ?x WHERE { ?x a"))

    assert not outcome.succeeded
    assert outcome.result is None
    assert outcome.error

    # The session keeps working after a failure
    retry = asyncio.run(service.run("SELECT ?x WHERE { ?x a progreval:Publico-Objetivo }"))
    assert retry.succeeded

    print("✓ Errors reported and retry possible")


def test_literal_containing_limit_untouched():
    """Test that a LIMIT inside a string literal reaches the evaluator unchanged."""
    print("Testing LIMIT inside a string literal...")

    query = (
        "SELECT ?c ?label WHERE { ?c a progreval:Concepto-Fundamental ; rdfs:label ?label "
        "FILTER(!CONTAINS(?label, \"LIMIT 9\")) }"
    )
    service = QueryService(build_sample_store())
    normalized, modifiers = service.prepare(query)
    assert '"LIMIT 9"' in normalized
    assert modifiers.limit == 9

    outcome = asyncio.run(service.run(query))
    assert outcome.succeeded, outcome.error
    # Every label passes the filter; an emptied literal would match none
    assert len(outcome.result) == 3

    print("✓ Literal kept intact")


def run_all_tests():
    """Run all query service tests."""
    print("=" * 50)
    print("Running Query Service Tests")
    print("=" * 50)

    test_functions = [
        test_prepare,
        test_run_random_limited_sample,
        test_run_without_modifiers,
        test_run_reports_errors,
        test_literal_containing_limit_untouched,
    ]

    passed = 0
    failed = 0

    for test_func in test_functions:
        try:
            test_func()
            passed += 1
        except Exception as e:
            print(f"✗ {test_func.__name__} FAILED: {e}")
            failed += 1

    print("=" * 50)
    print(f"Test Results: {passed} passed, {failed} failed")
    print("=" * 50)

    return failed == 0


def main():
    """Main function to run the tests."""
    return 0 if run_all_tests() else 1


if __name__ == "__main__":
    exit(main())
