"""
Domain models for query execution and result post-processing.

These models represent the values bound by a query, the rows and result sets
produced by the executor, and the modifiers compensated for after execution.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class QueryError(RuntimeError):
    """Base error for query compilation and evaluation failures."""


class QuerySyntaxError(QueryError):
    """Query text could not be compiled by the evaluator."""


class QueryExecutionError(QueryError):
    """Evaluator failed while matching rows; no partial rows are kept."""


def local_name(iri: str) -> str:
    """Text after the last '#' of an IRI, or the whole IRI when that is empty."""
    return iri.split("#")[-1] or iri


class TermKind(str, Enum):
    """Kinds of values a variable can be bound to."""
    NAMED_RESOURCE = "named_resource"
    LITERAL = "literal"
    BLANK_NODE = "blank_node"


class BoundValue(BaseModel):
    """A single value bound to a query variable."""

    model_config = ConfigDict(frozen=True)

    kind: TermKind = Field(..., description="Named resource, literal or blank node")
    value: str = Field(..., description="IRI for named resources, lexical form for literals")
    datatype: Optional[str] = Field(None, description="Datatype IRI of a typed literal")
    language: Optional[str] = Field(None, description="Language tag of a literal")

    @property
    def is_named_resource(self) -> bool:
        return self.kind == TermKind.NAMED_RESOURCE

    @property
    def local_name(self) -> str:
        return local_name(self.value)


class ResultRow(BaseModel):
    """One match of a query: variable name (without '?') -> bound value.

    Only bound variables are present; key order follows the query's variables.
    """

    model_config = ConfigDict(frozen=True)

    bindings: Dict[str, BoundValue] = Field(default_factory=dict, description="Bound values by variable name")

    def keys(self) -> List[str]:
        return list(self.bindings.keys())

    def get(self, name: str) -> Optional[BoundValue]:
        return self.bindings.get(name.lstrip("?$"))

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None


class ResultSet(BaseModel):
    """Ordered rows produced by one query plus its declared output variables."""

    model_config = ConfigDict(frozen=True)

    rows: List[ResultRow] = Field(default_factory=list, description="Rows in evaluator (or post-processed) order")
    variables: List[str] = Field(default_factory=list, description="Declared output variables, empty for SELECT *")

    def first_row_keys(self) -> List[str]:
        """Ordered key sequence of the first row, empty when there are no rows."""
        if not self.rows:
            return []
        return self.rows[0].keys()

    def __len__(self) -> int:
        return len(self.rows)

    def __bool__(self) -> bool:
        return len(self.rows) > 0


class ModifierSet(BaseModel):
    """Solution modifiers the evaluator does not apply itself."""

    model_config = ConfigDict(frozen=True)

    limit: int = Field(default=0, ge=0, description="Maximum number of rows, 0 means unlimited")
    randomize: bool = Field(default=False, description="Shuffle the rows before truncation")

    @property
    def is_empty(self) -> bool:
        return self.limit == 0 and not self.randomize


class QueryOutcome(BaseModel):
    """Result of running a user query: either a result set or an error message."""

    query: str = Field(..., description="Original query text")
    normalized_query: str = Field("", description="Text handed to the evaluator")
    modifiers: ModifierSet = Field(default_factory=ModifierSet, description="Modifiers extracted from the original text")
    result: Optional[ResultSet] = Field(None, description="Post-processed result set on success")
    error: Optional[str] = Field(None, description="Error message on failure")
    execution_time_ms: float = Field(0.0, description="Wall-clock time of compile and evaluation")

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.result is not None
