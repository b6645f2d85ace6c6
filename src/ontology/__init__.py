"""
Ontology Loading & Store Module

This module fetches the ontology document, parses it into an in-memory RDF
store and exposes that store, read-only, to every component issuing queries.

Public Interface:
- OntologyService: Load lifecycle, status text and access to the store

Private Components:
- OntologyStore: rdflib-backed store that compiles and runs SPARQL queries
- Data sources: HTTP and local file
- Domain models: OntologyDocument, CompiledQuery, OntologyStats, LoadStatus
"""

from .service import OntologyService

__all__ = ["OntologyService"]
