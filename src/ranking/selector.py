"""
Ranking selector - orders scored terms and keeps the top of the list.

Ordering:
    1. score, descending (most distinctive first)
    2. term, ascending (code-point order) when scores are equal

The secondary key makes the ranking reproducible: the frequency map that
feeds the scorer carries no meaningful order, so equal scores would otherwise
come out in whatever order the terms were first seen.
"""

import heapq
from typing import Iterable, List, Tuple

from .scorer import TermRecord

DEFAULT_LIMIT = 50


def ranking_key(record: TermRecord) -> Tuple[float, str]:
    """Sort key placing higher scores first, then terms alphabetically"""
    return (-record.score, record.term)


def select_top_terms(
    records: Iterable[TermRecord],
    limit: int = DEFAULT_LIMIT,
) -> List[TermRecord]:
    """
    Rank records and truncate to `limit` entries.

    Uses a bounded heap, O(k log limit) for k records. The result is the
    same as sorting everything by ranking_key and slicing.

    Args:
        records: Scored terms in any order
        limit: Maximum number of records returned (default: 50)

    Returns:
        At most `limit` records, fully sorted; all records when
        there are fewer than `limit`

    Raises:
        ValueError: limit < 1

    Example:
        >>> select_top_terms([
        ...     TermRecord("hello", 2, 0.41),
        ...     TermRecord("world", 1, 1.1),
        ... ])
        [TermRecord(term='world', frequency=1, score=1.1),
         TermRecord(term='hello', frequency=2, score=0.41)]
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    return heapq.nsmallest(limit, records, key=ranking_key)
