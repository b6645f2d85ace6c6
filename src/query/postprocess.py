"""
Post-processing of result sets: random reordering, then truncation.
"""

import random
from typing import Optional

from .domain import ModifierSet, ResultSet


def apply_modifiers(result_set: ResultSet, modifiers: ModifierSet,
                    rng: Optional[random.Random] = None) -> ResultSet:
    """Apply extracted modifiers to a result set.

    Shuffling always happens before truncation, so a limited random sample is
    drawn from the whole set rather than from a prefix of it.

    Args:
        result_set: Rows accumulated by the executor
        modifiers: Modifiers extracted from the original query text
        rng: Random source for the shuffle (module-level generator if None)

    Returns:
        A new ResultSet; the input is returned unchanged when no modifier applies
    """
    if modifiers.is_empty:
        return result_set

    rows = list(result_set.rows)

    if modifiers.randomize:
        (rng or random).shuffle(rows)

    if 0 < modifiers.limit < len(rows):
        rows = rows[:modifiers.limit]

    return result_set.model_copy(update={"rows": rows})
