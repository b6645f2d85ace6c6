"""
Extraction of solution modifiers that are applied after evaluation.

`LIMIT n` and `ORDER BY RAND()` are read from the original query text. The
evaluator never applies them (see OntologyStore.compile_query), so the
post-processor alone decides order and size.
"""

import re

from .domain import ModifierSet

_LIMIT_RE = re.compile(r"\bLIMIT\s+(\d+)", re.IGNORECASE)
_RANDOM_ORDER_RE = re.compile(r"\bORDER\s+BY\s+RAND\s*\([^)]*\)", re.IGNORECASE)


def extract_modifiers(query_text: str) -> ModifierSet:
    """Read LIMIT and random ordering from the original query text.

    The first occurrence of each pattern wins. A missing LIMIT yields 0,
    which downstream means "unlimited".
    """
    limit_match = _LIMIT_RE.search(query_text)
    limit = int(limit_match.group(1), 10) if limit_match else 0
    randomize = _RANDOM_ORDER_RE.search(query_text) is not None
    return ModifierSet(limit=limit, randomize=randomize)

