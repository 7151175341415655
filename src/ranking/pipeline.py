"""
Term ranking pipeline.

bytes -> tokenize -> count_terms -> TermScorer -> select_top_terms

Every call is independent: no state is kept between documents.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from .counter import count_terms
from .scorer import TermRecord, TermScorer
from .selector import DEFAULT_LIMIT, select_top_terms
from .tokenizer import Alphabet, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TermRanking:
    """Ranked terms of one document plus the statistics they came from"""
    terms: List[TermRecord] = field(default_factory=list)
    token_count: int = 0      # N, total tokens in the document
    distinct_terms: int = 0   # Vocabulary size before truncation

    def __iter__(self) -> Iterator[TermRecord]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)


def compute_term_ranking(
    document: bytes,
    alphabets: Optional[Sequence[Alphabet]] = None,
    limit: int = DEFAULT_LIMIT,
    scorer: Optional[TermScorer] = None,
) -> TermRanking:
    """
    Rank the most distinctive terms of a single document.

    Any byte sequence is valid input; an empty or token-free document
    gives an empty ranking.

    Args:
        document: Raw document bytes
        alphabets: Accepted alphabets (default: Latin + Cyrillic)
        limit: Maximum number of ranked terms (default: 50)
        scorer: Scorer instance (default: TermScorer with 2-decimal precision)

    Returns:
        TermRanking with at most `limit` records sorted by score descending,
        term ascending on ties

    Example:
        >>> ranking = compute_term_ranking(b"Hello hello WORLD")
        >>> [(r.term, r.frequency, r.score) for r in ranking]
        [('world', 1, 1.1), ('hello', 2, 0.41)]
        >>> ranking.token_count
        3
    """
    tokens = tokenize(document, alphabets)
    term_frequencies = count_terms(tokens)

    if scorer is None:
        scorer = TermScorer()
    records = scorer.score_terms(term_frequencies, token_count=len(tokens))
    ranked = select_top_terms(records, limit=limit)

    logger.debug(
        f"Ranked document: {len(document)} bytes, {len(tokens)} tokens, "
        f"{len(term_frequencies)} distinct terms, {len(ranked)} returned"
    )

    return TermRanking(
        terms=ranked,
        token_count=len(tokens),
        distinct_terms=len(term_frequencies),
    )
