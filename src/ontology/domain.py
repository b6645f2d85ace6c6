"""
Domain models for the ontology module.

These models describe the loaded ontology, the load lifecycle and the
compiled form of a query against the in-memory store.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from rdflib.plugins.sparql.sparql import Query


class OntologyLoadError(RuntimeError):
    """The ontology document could not be fetched or parsed."""


class OntologyNotLoadedError(RuntimeError):
    """A query was attempted before the ontology was loaded."""


class LoadStatus(str, Enum):
    """Lifecycle of the ontology load."""
    PENDING = "pending"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass
class OntologyDocument:
    """Raw ontology document as fetched from its source."""

    text: str
    source_locator: str                 # URL or file path, also used as base IRI
    media_type: str                     # e.g. "application/rdf+xml", "text/turtle"


@dataclass
class CompiledQuery:
    """A query compiled by the evaluator, ready to run against the store."""

    text: str
    declared_variables: List[str]       # projection in declared order, empty for SELECT *
    variable_order: List[str]           # order used for row keys (declared, else first occurrence)
    algebra: Query = field(repr=False)


@dataclass
class OntologyStats:
    """Statistics about the loaded ontology."""

    total_triples: int
    total_classes: int
    total_individuals: int
    total_object_properties: int
    total_datatype_properties: int
