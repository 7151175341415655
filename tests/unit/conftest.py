"""Unit test configuration - environment and sample documents"""

import os
import tempfile
from pathlib import Path

import pytest

# CRITICAL: Set env vars BEFORE importing src.main
# main.py loads settings and configures logging at module level (on import)
os.environ.setdefault(
    "LOG_FILE",
    str(Path(tempfile.gettempdir()) / "term-rank-tests" / "term-rank.log"),
)
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def greeting_document():
    """Three tokens, two distinct terms"""
    return b"Hello hello WORLD"


@pytest.fixture
def two_letter_words():
    """64 distinct two-letter words: aa, ab, ..., hh"""
    return [a + b for a in "abcdefgh" for b in "abcdefgh"]


@pytest.fixture
def wide_vocabulary_document(two_letter_words):
    """64 distinct words, each once - every score ties"""
    return " ".join(reversed(two_letter_words)).encode("utf-8")


@pytest.fixture
def mixed_document():
    """Latin and Cyrillic text with digits, punctuation and hyphenation"""
    return (
        "The state-of-the-art parser (v2.0) handles 3 cases.\n"
        "Парсер обрабатывает текст; парсер не падает!\n"
        "The parser, the PARSER, the Parser."
    ).encode("utf-8")
