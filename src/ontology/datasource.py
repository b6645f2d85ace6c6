"""
Sources of the ontology document.
"""

import logging
from pathlib import Path
from typing import Optional

import requests

from .domain import OntologyDocument, OntologyLoadError

logger = logging.getLogger(__name__)


class OntologyDataSource:
    """
    This class serves as an interface for retrieving the serialized ontology document.
    """
    def fetch(self) -> OntologyDocument:
        """
        Retrieve the ontology document.

        :return: OntologyDocument with the raw text, its locator and media type
        :raises OntologyLoadError: If the document cannot be retrieved
        """
        raise NotImplementedError


class HttpOntologyDataSource(OntologyDataSource):
    """
    Fetches the ontology document over HTTP without credentials.
    """
    def __init__(self, url: str, media_type: str = "application/rdf+xml", timeout: float = 30.0,
                 session: Optional[requests.Session] = None):
        """
        :param url: Location of the ontology document
        :param media_type: RDF serialization of the document
        :param timeout: Request timeout in seconds
        :param session: Optional requests session (a new one is used if None)
        """
        self.url = url
        self.media_type = media_type
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def fetch(self) -> OntologyDocument:
        logger.info("Fetching ontology from %s", self.url)
        try:
            response = self.session.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise OntologyLoadError(f"Failed to fetch ontology from {self.url}: {e}") from e

        if not response.ok:
            raise OntologyLoadError(f"Network response was not ok: {response.status_code}")

        return OntologyDocument(text=response.text, source_locator=self.url, media_type=self.media_type)


class FileOntologyDataSource(OntologyDataSource):
    """
    Reads the ontology document from a local file.
    """
    def __init__(self, path: str, media_type: str = "application/rdf+xml"):
        self.path = Path(path)
        self.media_type = media_type

    def fetch(self) -> OntologyDocument:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise OntologyLoadError(f"Failed to read ontology file {self.path}: {e}") from e

        return OntologyDocument(text=text, source_locator=self.path.resolve().as_uri(), media_type=self.media_type)
