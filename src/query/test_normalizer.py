"""
Unit test for query text normalization.

HOW TO RUN:
From the src directory, run:
    python -m query.test_normalizer

Or from the project root:
    cd src; python -m query.test_normalizer
"""

import re

from .normalizer import (
    DEFAULT_PREFIX_BLOCK, build_prefix_block, has_prefix_declaration,
    normalize_query, strip_comment_lines
)


def test_strip_comment_lines_all_terminators():
    """Test comment removal for \\n, \\r\\n and \\r line endings."""
    print("Testing comment stripping across line terminators...")

    text = "# comment\nSELECT ?x\n  # indented\r\nWHERE { ?x a ?y }\r# old mac\rLIMIT 1"
    assert strip_comment_lines(text) == "SELECT ?x\nWHERE { ?x a ?y }\rLIMIT 1"

    print("✓ Comment lines removed with their terminators")


def test_strip_comment_lines_keeps_other_lines():
    """Test that lines not starting with '#' are untouched."""
    print("Testing that non-comment lines are preserved...")

    text = "SELECT ?x\nWHERE { ?x a <urn:x#Thing> } # trailing\n\n   \nLIMIT 3\n"
    assert strip_comment_lines(text) == text

    print("✓ Non-comment lines preserved verbatim")


def test_stripped_text_has_no_comment_lines():
    """Test that no remaining line begins with the comment marker."""
    print("Testing comment-free output...")

    text = "#a\n#b\r\n  #c\rSELECT * WHERE { ?s ?p ?o }\n\t# d\n"
    result = strip_comment_lines(text)
    for line in re.split(r"\r\n|\n|\r", result):
        assert not line.lstrip().startswith("#"), f"Comment line left: {line!r}"
    assert result == "SELECT * WHERE { ?s ?p ?o }\n"

    print("✓ No comment lines left")


def test_empty_text():
    """Test normalization of an empty query."""
    print("Testing empty query text...")

    assert strip_comment_lines("") == ""
    assert normalize_query("") == DEFAULT_PREFIX_BLOCK

    print("✓ Empty text handled")


def test_prefix_block_injected_once():
    """Test that the three default prefixes are prepended when none are declared."""
    print("Testing prefix injection...")

    query = "SELECT ?c WHERE { ?c a progreval:Concepto-Fundamental }"
    result = normalize_query(query)

    assert result == DEFAULT_PREFIX_BLOCK + query
    assert result.count("PREFIX") == 3
    assert "PREFIX rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#>" in result
    assert "PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>" in result
    assert "PREFIX progreval: <urn:protege:ontology:progreval#>" in result

    print("✓ Default prefix block prepended")


def test_existing_prefix_not_duplicated():
    """Test that declared prefixes (any case) suppress injection."""
    print("Testing existing prefix declarations...")

    query = "prefix ex: <urn:ex#>\nSELECT ?s WHERE { ?s a ex:Thing }"
    assert normalize_query(query) == query
    assert has_prefix_declaration("PrEfIx a: <urn:a#>")
    assert not has_prefix_declaration("SELECT * WHERE { ?s ?p ?o }")

    print("✓ Existing prefixes respected")


def test_commented_prefix_does_not_count():
    """Test that a PREFIX inside a comment line does not suppress injection."""
    print("Testing commented-out prefix...")

    query = "# PREFIX ex: <urn:ex#>\nSELECT ?s WHERE { ?s ?p ?o }"
    result = normalize_query(query)

    assert result == DEFAULT_PREFIX_BLOCK + "SELECT ?s WHERE { ?s ?p ?o }"

    print("✓ Commented prefix ignored")


def test_custom_prefix_block():
    """Test building a prefix block for another domain namespace."""
    print("Testing custom prefix block...")

    block = build_prefix_block("ex", "urn:example#")
    assert block.endswith("PREFIX ex: <urn:example#>\n")
    assert normalize_query("SELECT ?s WHERE { ?s a ex:A }", block).startswith(block)

    print("✓ Custom prefix block used")


def run_all_tests():
    """Run all normalizer tests."""
    print("=" * 50)
    print("Running Query Normalizer Tests")
    print("=" * 50)

    test_functions = [
        test_strip_comment_lines_all_terminators,
        test_strip_comment_lines_keeps_other_lines,
        test_stripped_text_has_no_comment_lines,
        test_empty_text,
        test_prefix_block_injected_once,
        test_existing_prefix_not_duplicated,
        test_commented_prefix_does_not_count,
        test_custom_prefix_block,
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
