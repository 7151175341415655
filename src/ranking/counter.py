"""
Frequency counter - aggregates tokens into term occurrence counts.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable

logger = logging.getLogger(__name__)


def count_terms(tokens: Iterable[str]) -> Dict[str, int]:
    """
    Count occurrences of every distinct term in a single pass.

    Args:
        tokens: Token sequence produced by the tokenizer

    Returns:
        Dict {term: count}; empty for an empty token sequence

    Example:
        >>> count_terms(["hello", "hello", "world"])
        {'hello': 2, 'world': 1}
    """
    term_frequencies = defaultdict(int)

    for term in tokens:
        term_frequencies[term] += 1

    logger.debug(f"Counted {len(term_frequencies)} distinct terms")

    return dict(term_frequencies)
