"""Utility helpers for normalization, anagram keys, and logging."""

from __future__ import annotations

import logging
import re
from collections import Counter

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

WHITESPACE_PATTERN = re.compile(r"\s+")


def setup_logging(level: int = logging.INFO) -> None:
    """Configure stderr logging once per process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def normalize(word: str) -> str:
    """
    Normalize a word for anagram comparison.

    Steps:
    1) Delete every whitespace run (spaces, tabs, newlines).
    2) Lowercase.
    3) Trim leading/trailing whitespace.

    Accented characters pass through unchanged apart from case.
    """
    if not isinstance(word, str):
        raise TypeError(f"expected str, got {type(word).__name__}")
    return WHITESPACE_PATTERN.sub("", word).lower().strip()


def anagram_key(word: str) -> str:
    """Canonical sorted-letter key; two words share it iff they are anagrams."""
    return "".join(sorted(normalize(word)))


def letter_counts(word: str) -> Counter[str]:
    """Occurrence count of each symbol in the normalized word."""
    return Counter(normalize(word))
