"""
Unit test for the ontology data sources.

HOW TO RUN:
From the src directory, run:
    python -m ontology.test_datasource

Or from the project root:
    cd src; python -m ontology.test_datasource

The HTTP source is exercised with a mock session; no network access is needed.
"""

import os
import tempfile

import requests

from .datasource import FileOntologyDataSource, HttpOntologyDataSource
from .domain import OntologyLoadError
from .sample import SAMPLE_ONTOLOGY_TTL


class MockResponse:
    """Mock of the parts of requests.Response used by the data source."""

    def __init__(self, status_code: int, text: str = ""):
        self.status_code = status_code
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400


class MockSession:
    """Mock requests session returning a canned response or raising."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


def test_http_fetch_success():
    """Test a successful HTTP fetch."""
    print("Testing HTTP fetch...")

    session = MockSession(MockResponse(200, "<rdf:RDF/>"))
    source = HttpOntologyDataSource("http://example.org/onto.rdf", timeout=5, session=session)
    document = source.fetch()

    assert document.text == "<rdf:RDF/>"
    assert document.source_locator == "http://example.org/onto.rdf"
    assert document.media_type == "application/rdf+xml"
    assert session.calls == [("http://example.org/onto.rdf", 5)]

    print("✓ Document fetched")


def test_http_fetch_bad_status():
    """Test that a non-success status raises OntologyLoadError."""
    print("Testing HTTP error status...")

    source = HttpOntologyDataSource("http://example.org/missing", session=MockSession(MockResponse(404)))
    try:
        source.fetch()
        assert False, "Should have raised OntologyLoadError"
    except OntologyLoadError as e:
        assert "404" in str(e)

    print("✓ Error status rejected")


def test_http_fetch_network_failure():
    """Test that transport errors raise OntologyLoadError."""
    print("Testing network failure...")

    session = MockSession(error=requests.ConnectionError("connection refused"))
    source = HttpOntologyDataSource("http://example.org/onto.rdf", session=session)
    try:
        source.fetch()
        assert False, "Should have raised OntologyLoadError"
    except OntologyLoadError as e:
        assert "connection refused" in str(e)

    print("✓ Network failure reported")


def test_file_fetch():
    """Test reading a document from a local file."""
    print("Testing file source...")

    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "progreval.ttl")
        with open(path, "w", encoding="utf-8") as f:
            f.write(SAMPLE_ONTOLOGY_TTL)

        document = FileOntologyDataSource(path, media_type="text/turtle").fetch()
        assert document.text == SAMPLE_ONTOLOGY_TTL
        assert document.media_type == "text/turtle"
        assert document.source_locator.startswith("file://")

        try:
            FileOntologyDataSource(os.path.join(tmp, "missing.rdf")).fetch()
            assert False, "Should have raised OntologyLoadError"
        except OntologyLoadError:
            pass

    print("✓ File source read and missing file reported")


def run_all_tests():
    """Run all data source tests."""
    print("=" * 50)
    print("Running Ontology Data Source Tests")
    print("=" * 50)

    test_functions = [
        test_http_fetch_success,
        test_http_fetch_bad_status,
        test_http_fetch_network_failure,
        test_file_fetch,
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
