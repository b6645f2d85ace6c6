"""
High-level query service: the path from free-form query text to a post-processed
result set.

Pipeline for a user query:
    1. Extract LIMIT / ORDER BY RAND() from the original text.
    2. Normalize the text (comment lines removed, default prefixes injected).
    3. Execute against the store and accumulate every row. The store leaves
       LIMIT and RAND() ordering out of the evaluation.
    4. Shuffle (if requested), then truncate (if limited).

Display is left to render.results (`render_outcome`).

Compile and evaluation errors stop at this boundary: they are reported in the
returned QueryOutcome and never raised, so the caller can correct the query
and retry.
"""

import logging
import random
import time
from typing import Optional, Tuple

from .domain import ModifierSet, QueryError, QueryOutcome
from .executor import QueryableStore, QueryExecutor
from .modifiers import extract_modifiers
from .normalizer import DEFAULT_PREFIX_BLOCK, normalize_query
from .postprocess import apply_modifiers

logger = logging.getLogger(__name__)


class QueryService:
    """Runs user queries against the ontology store and post-processes the results."""

    def __init__(self, store: QueryableStore, prefix_block: str = DEFAULT_PREFIX_BLOCK,
                 rng: Optional[random.Random] = None):
        """Initialize the query service.

        Args:
            store: Read-only store holding the loaded ontology
            prefix_block: Prefix declarations injected into queries declaring none
            rng: Optional random source used for ORDER BY RAND()
        """
        self.executor = QueryExecutor(store)
        self.prefix_block = prefix_block
        self.rng = rng

    def prepare(self, query_text: str) -> Tuple[str, ModifierSet]:
        """Return the evaluator-ready text and the modifiers of the original text."""
        modifiers = extract_modifiers(query_text)
        normalized = normalize_query(query_text, self.prefix_block)
        return normalized, modifiers

    async def run(self, query_text: str) -> QueryOutcome:
        """Run a user query and post-process its result set."""
        normalized, modifiers = self.prepare(query_text)
        outcome = QueryOutcome(query=query_text, normalized_query=normalized, modifiers=modifiers)

        start_time = time.time()
        try:
            result_set = await self.executor.execute(normalized)
        except QueryError as e:
            logger.error("Query failed: %s", e)
            outcome.error = str(e)
            return outcome
        finally:
            outcome.execution_time_ms = (time.time() - start_time) * 1000

        outcome.result = apply_modifiers(result_set, modifiers, self.rng)
        logger.info("Query returned %d of %d rows", len(outcome.result), len(result_set))
        return outcome

