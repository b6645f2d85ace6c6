"""
Query Module

Compensating layer between free-form SPARQL text and the in-memory evaluator:
comment stripping, prefix injection, LIMIT / ORDER BY RAND() post-processing
and asynchronous execution.

Public Interface:
- QueryService: Runs user queries end to end
- QueryExecutor: Executes modifier-free queries against a store

Private Components:
- normalizer, modifiers, postprocess: Text and result transformations
- Domain models: ResultSet, ResultRow, BoundValue, ModifierSet, QueryOutcome
"""

from .domain import QueryError, QueryExecutionError, QuerySyntaxError
from .executor import QueryExecutor
from .service import QueryService

__all__ = ["QueryService", "QueryExecutor", "QueryError", "QuerySyntaxError", "QueryExecutionError"]
