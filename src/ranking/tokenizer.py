"""
Tokenizer for term ranking.

Tokenization pipeline:
1. Decode bytes as UTF-8 (undecodable bytes become separators)
2. Lowercase conversion ("İ" folds to a plain "i")
3. Extract letter runs of length >= 2 from the configured alphabets
4. Keep hyphenated compounds as one token when every segment has length >= 2

Digits, punctuation, whitespace and symbols only separate tokens.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class Alphabet:
    """Named set of lowercase letter ranges accepted inside a token"""
    name: str
    ranges: Tuple[Tuple[str, str], ...]

    def character_class(self) -> str:
        """Regex character-class body for this alphabet (without brackets)"""
        return "".join(
            f"{re.escape(start)}-{re.escape(end)}" for start, end in self.ranges
        )


LATIN = Alphabet("latin", (("a", "z"),))
# Basic Cyrillic block only: "ё" is outside "а-я" and acts as a separator
CYRILLIC = Alphabet("cyrillic", (("а", "я"),))

BUILTIN_ALPHABETS = {alphabet.name: alphabet for alphabet in (LATIN, CYRILLIC)}
DEFAULT_ALPHABETS: Tuple[Alphabet, ...] = (LATIN, CYRILLIC)

MIN_SEGMENT_LENGTH = 2

DOTTED_CAPITAL_I = "\u0130"


def resolve_alphabets(names: Iterable[str]) -> Tuple[Alphabet, ...]:
    """
    Look up built-in alphabets by name.

    Args:
        names: Alphabet names, e.g. ["latin", "cyrillic"] (case-insensitive)

    Returns:
        Tuple of Alphabet in the given order, duplicates removed

    Raises:
        ValueError: Unknown name or empty selection
    """
    resolved = []
    for name in names:
        key = name.strip().lower()
        if not key:
            continue
        if key not in BUILTIN_ALPHABETS:
            raise ValueError(
                f"Unknown alphabet '{name}'. "
                f"Available: {', '.join(sorted(BUILTIN_ALPHABETS))}"
            )
        if BUILTIN_ALPHABETS[key] not in resolved:
            resolved.append(BUILTIN_ALPHABETS[key])

    if not resolved:
        raise ValueError("At least one alphabet must be configured")
    return tuple(resolved)


@lru_cache(maxsize=16)
def _token_pattern(alphabets: Tuple[Alphabet, ...]) -> "re.Pattern[str]":
    letters = "[" + "".join(a.character_class() for a in alphabets) + "]"
    segment = f"{letters}{{{MIN_SEGMENT_LENGTH},}}"
    return re.compile(f"{segment}(?:-{segment})*")


def tokenize(
    document: Union[bytes, str],
    alphabets: Optional[Sequence[Alphabet]] = None,
) -> List[str]:
    """
    Split a document into normalized word tokens.

    Args:
        document: Raw document bytes (decoded as UTF-8) or already decoded text
        alphabets: Accepted alphabets (default: Latin + Cyrillic)

    Returns:
        Tokens in source order; same input always gives the same list

    Raises:
        ValueError: Empty alphabet selection

    Examples:
        >>> tokenize(b"Hello hello WORLD")
        ['hello', 'hello', 'world']

        >>> tokenize("co-op co op a")
        ['co-op', 'co', 'op']

        >>> tokenize(b"123 !!! --- 456")
        []
    """
    if alphabets is None:
        alphabets = DEFAULT_ALPHABETS
    alphabets = tuple(alphabets)
    if not alphabets:
        raise ValueError("At least one alphabet must be configured")

    if not document:
        return []

    if isinstance(document, bytes):
        text = document.decode("utf-8", errors="replace")
    else:
        text = document

    # str.lower() turns "İ" into "i" + U+0307, which would split the word
    text = text.replace(DOTTED_CAPITAL_I, "i").lower()

    return _token_pattern(alphabets).findall(text)
