"""
In-memory RDF store holding the loaded ontology.

The store is built once from a parsed document and is read-only afterwards.
It compiles SPARQL SELECT queries and evaluates them, returning one mapping
of variable name to RDF term per match.
"""

import logging
from typing import Dict, List, Optional

from rdflib import Graph, Variable, RDF, OWL
from rdflib.plugins.sparql.algebra import translateQuery, traverse
from rdflib.plugins.sparql.parser import parseQuery
from rdflib.plugins.sparql.parserutils import CompValue
from rdflib.term import Identifier

from query.domain import QueryExecutionError, QuerySyntaxError

from .domain import CompiledQuery, OntologyDocument, OntologyLoadError, OntologyStats

logger = logging.getLogger(__name__)


class OntologyStore:
    """Read-only in-memory RDF store backed by an rdflib Graph."""

    def __init__(self, graph: Optional[Graph] = None):
        self.graph = graph if graph is not None else Graph()

    @classmethod
    def parse(cls, document_text: str, source_locator: str, media_type: str) -> "OntologyStore":
        """Parse a serialized RDF document into a new store.

        Args:
            document_text: The serialized document
            source_locator: URL or path of the document, used as base IRI
            media_type: RDF serialization, e.g. "application/rdf+xml"

        Raises:
            OntologyLoadError: If the document cannot be parsed
        """
        graph = Graph()
        try:
            graph.parse(data=document_text, publicID=source_locator, format=media_type)
        except Exception as e:
            raise OntologyLoadError(f"Failed to parse ontology document {source_locator}: {e}") from e

        logger.info("Parsed %d triples from %s", len(graph), source_locator)
        return cls(graph)

    @classmethod
    def from_document(cls, document: OntologyDocument) -> "OntologyStore":
        return cls.parse(document.text, document.source_locator, document.media_type)

    def __len__(self) -> int:
        return len(self.graph)

    def compile_query(self, query_text: str) -> CompiledQuery:
        """Compile SPARQL text into its algebra form.

        The top-level LIMIT and any RAND() ordering condition are left out of
        the compiled form; they are applied to the accumulated rows afterwards.
        The query text itself, string literals included, is never rewritten.

        Raises:
            QuerySyntaxError: If the text is not a valid SELECT query; the
                message carries the parser's diagnostic
        """
        try:
            parsed = parseQuery(query_text)
        except Exception as e:
            raise QuerySyntaxError(str(e)) from e

        select = parsed[1]
        if select.name != "SelectQuery":
            raise QuerySyntaxError(f"Only SELECT queries are supported, got {select.name}")

        if select.projection:
            declared = [str(v.var or v.evar) for v in select.projection]
            variable_order = list(declared)
        else:
            declared = []
            variable_order = _variables_in_order(select.where)

        _drop_solution_modifiers(select)

        try:
            # Unknown prefixes surface here, not in the parser
            algebra = translateQuery(parsed)
        except Exception as e:
            raise QuerySyntaxError(str(e)) from e

        # SELECT * may project variables bound only inside sub-selects
        extra = sorted(str(v) for v in algebra.algebra.PV if str(v) not in variable_order)
        variable_order.extend(extra)

        return CompiledQuery(
            text=query_text,
            declared_variables=declared,
            variable_order=variable_order,
            algebra=algebra,
        )

    def run_query(self, compiled: CompiledQuery) -> List[Dict[str, Identifier]]:
        """Evaluate a compiled query and return all matches.

        Each match maps variable names to terms; unbound variables are absent
        and keys follow `compiled.variable_order`.

        Raises:
            QueryExecutionError: If the evaluator fails while matching rows
        """
        order = [Variable(name) for name in compiled.variable_order]
        try:
            bindings = self.graph.query(compiled.algebra).bindings
        except Exception as e:
            raise QueryExecutionError(f"Query evaluation failed: {e}") from e

        rows = []
        for binding in bindings:
            row = {}
            for var in order:
                term = binding.get(var)
                if term is not None:
                    row[str(var)] = term
            rows.append(row)
        return rows

    def stats(self) -> OntologyStats:
        """Compute counts of the main ontology constructs."""
        return OntologyStats(
            total_triples=len(self.graph),
            total_classes=len(set(self.graph.subjects(RDF.type, OWL.Class))),
            total_individuals=len(set(self.graph.subjects(RDF.type, OWL.NamedIndividual))),
            total_object_properties=len(set(self.graph.subjects(RDF.type, OWL.ObjectProperty))),
            total_datatype_properties=len(set(self.graph.subjects(RDF.type, OWL.DatatypeProperty))),
        )


def _variables_in_order(tree) -> List[str]:
    """Variables of a parse tree in order of first occurrence."""
    seen: List[str] = []

    def _visit(node):
        if isinstance(node, Variable) and str(node) not in seen:
            seen.append(str(node))

    traverse(tree, visitPre=_visit)
    return seen


def _drop_solution_modifiers(select: CompValue) -> None:
    """Remove LIMIT and RAND() ordering from a parsed SELECT query, in place."""
    limitoffset = select.limitoffset
    if limitoffset is not None and limitoffset.limit is not None:
        if limitoffset.offset is not None:
            del limitoffset["limit"]
        else:
            del select["limitoffset"]

    orderby = select.orderby
    if orderby is not None:
        conditions = [c for c in orderby.condition if not _is_random_order(c)]
        if conditions:
            orderby["condition"] = conditions
        else:
            del select["orderby"]


def _is_random_order(condition) -> bool:
    found = []

    def _visit(node):
        if isinstance(node, CompValue) and node.name == "Builtin_RAND":
            found.append(node)

    traverse(condition, visitPre=_visit)
    return bool(found)
