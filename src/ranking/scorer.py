"""
Single-document rarity scorer.

Each term is scored against the document it came from, not a corpus:

Formula:
    score(term) = round(ln(N / tf), 2)

Where:
    tf = occurrences of the term in the document
    N = total token count of the document (sum of all tf)

Rounding is half away from zero on the value scaled by 10^precision.
Scores are never negative since 1 <= tf <= N. A term filling every
token position scores 0.0.
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class TermRecord:
    """Distinct term with its document frequency and rarity score"""
    term: str
    frequency: int  # Occurrences in the document (>= 1)
    score: float    # round(ln(N / frequency), 2), higher = more distinctive


def round_half_away_from_zero(value: float, precision: int = 2) -> float:
    """
    Round to `precision` decimals, ties going away from zero.

    Python's round() uses banker's rounding, so it is not used here.

    Examples:
        >>> round_half_away_from_zero(0.405)
        0.41
        >>> round_half_away_from_zero(-1.005, 1)
        -1.0
    """
    scale = 10 ** precision
    return math.copysign(math.floor(abs(value) * scale + 0.5), value) / scale


class TermScorer:
    """
    Scores terms by how rare they are within one document.
    """

    def __init__(self, precision: int = 2):
        """
        Initialize scorer.

        Args:
            precision: Decimal places kept in scores
                Default: 2
        """
        if precision < 0:
            raise ValueError(f"precision must be >= 0, got {precision}")
        self.precision = precision

    def score(self, frequency: int, token_count: int) -> float:
        """Score one term occurring `frequency` times among `token_count` tokens"""
        return round_half_away_from_zero(
            math.log(token_count / frequency), self.precision
        )

    def score_terms(
        self,
        term_frequencies: Dict[str, int],
        token_count: Optional[int] = None,
    ) -> List[TermRecord]:
        """
        Build one TermRecord per distinct term.

        Args:
            term_frequencies: Term frequency map {term: count}
            token_count: Total number of tokens N
                Defaults to the sum of all counts

        Returns:
            TermRecords in the iteration order of `term_frequencies`
            (unordered - ranking is the selector's job)
            Empty list when there are no tokens

        Raises:
            ValueError: Non-positive count, or token_count smaller than
                the sum of counts

        Example:
            >>> TermScorer().score_terms({"hello": 2, "world": 1})
            [TermRecord(term='hello', frequency=2, score=0.41),
             TermRecord(term='world', frequency=1, score=1.1)]
        """
        total = sum(term_frequencies.values())
        if token_count is None:
            token_count = total

        if token_count == 0:
            return []

        if token_count < total:
            raise ValueError(
                f"token_count ({token_count}) is smaller than the sum of "
                f"term frequencies ({total})"
            )

        records = []
        for term, frequency in term_frequencies.items():
            if frequency < 1:
                raise ValueError(f"Frequency of '{term}' must be >= 1, got {frequency}")
            records.append(
                TermRecord(
                    term=term,
                    frequency=frequency,
                    score=self.score(frequency, token_count),
                )
            )

        return records
