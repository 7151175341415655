"""
Term ranking: the most distinctive terms of a single document.

This module scores every distinct term of one document by how rare it is
within that same document, without corpus-wide IDF statistics.

Components:
- tokenizer: Alphabet-aware word extraction (Latin + Cyrillic by default)
- counter: Term frequency aggregation
- scorer: Single-document rarity score round(ln(N / tf), 2)
- selector: Score-descending ranking with deterministic ties and truncation
- pipeline: compute_term_ranking() wiring the stages together

Key simplification: N is the token count of the document itself
- Not classical multi-document IDF
- No shared state between documents
"""

from .tokenizer import (
    Alphabet,
    CYRILLIC,
    DEFAULT_ALPHABETS,
    LATIN,
    resolve_alphabets,
    tokenize,
)
from .counter import count_terms
from .scorer import TermRecord, TermScorer, round_half_away_from_zero
from .selector import DEFAULT_LIMIT, ranking_key, select_top_terms
from .pipeline import TermRanking, compute_term_ranking

__all__ = [
    "Alphabet",
    "LATIN",
    "CYRILLIC",
    "DEFAULT_ALPHABETS",
    "resolve_alphabets",
    "tokenize",
    "count_terms",
    "TermRecord",
    "TermScorer",
    "round_half_away_from_zero",
    "DEFAULT_LIMIT",
    "ranking_key",
    "select_top_terms",
    "TermRanking",
    "compute_term_ranking",
]
