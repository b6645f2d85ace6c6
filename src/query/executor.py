"""
Asynchronous execution of SPARQL queries against an injected store.
"""

import asyncio
import logging
from typing import Any, List, Mapping, Protocol

from rdflib import BNode, Literal, URIRef

from .domain import BoundValue, QueryExecutionError, QuerySyntaxError, ResultRow, ResultSet, TermKind

logger = logging.getLogger(__name__)


class QueryableStore(Protocol):
    """Capability required from a store: compile a query and run it."""

    def compile_query(self, query_text: str) -> Any:
        ...

    def run_query(self, compiled: Any) -> List[Mapping[str, Any]]:
        ...


def to_bound_value(term) -> BoundValue:
    """Convert an rdflib term into a BoundValue."""
    if isinstance(term, URIRef):
        return BoundValue(kind=TermKind.NAMED_RESOURCE, value=str(term))
    if isinstance(term, BNode):
        return BoundValue(kind=TermKind.BLANK_NODE, value=str(term))
    if isinstance(term, Literal):
        return BoundValue(
            kind=TermKind.LITERAL,
            value=str(term),
            datatype=str(term.datatype) if term.datatype else None,
            language=term.language,
        )
    return BoundValue(kind=TermKind.LITERAL, value=str(term))


class QueryExecutor:
    """Runs compiled queries against a store without blocking the event loop."""

    def __init__(self, store: QueryableStore):
        """Initialize the executor.

        Args:
            store: Read-only store shared by every component issuing queries
        """
        self.store = store

    def compile(self, query_text: str):
        """Compile query text, raising QuerySyntaxError on invalid input."""
        return self.store.compile_query(query_text)

    async def execute(self, query_text: str) -> ResultSet:
        """Compile and evaluate a query, returning the complete result set.

        Rows are accumulated in evaluator order and only returned once the
        evaluation has finished; on failure no partial rows are kept.

        Raises:
            QuerySyntaxError: If the query cannot be compiled
            QueryExecutionError: If the evaluator fails while matching rows
        """
        compiled = self.compile(query_text)
        rows = await asyncio.to_thread(self._collect_rows, compiled)

        logger.debug("Query produced %d rows", len(rows))
        return ResultSet(rows=rows, variables=list(compiled.declared_variables))

    def _collect_rows(self, compiled) -> List[ResultRow]:
        try:
            matches = self.store.run_query(compiled)
            return [
                ResultRow(bindings={name: to_bound_value(term) for name, term in match.items()})
                for match in matches
            ]
        except (QuerySyntaxError, QueryExecutionError):
            raise
        except Exception as e:
            raise QueryExecutionError(f"Query evaluation failed: {e}") from e
