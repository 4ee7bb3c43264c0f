"""Anagram comparison, generation, counting, grouping, and shuffling."""

from __future__ import annotations

import logging
import math
import random
from collections import defaultdict
from typing import Iterable

from engine import iter_permutations
from models import (
    ITALIAN_ANAGRAM_EXAMPLES,
    ComparisonResult,
    DemoReport,
    GenerateOptions,
)
from utils import anagram_key, letter_counts, normalize

logger = logging.getLogger(__name__)

DEMO_COMPARISONS = (("roma", "amor"), ("casa", "saca"), ("ciao", "hello"))
DEMO_SAMPLE_WORD = "cane"
DEMO_SHUFFLE_WORD = "italiano"
DEMO_GROUP_WORDS = ("roma", "amor", "mora", "cane", "acne", "casa", "pane", "pena", "nape")


def are_anagrams(first: str, second: str) -> bool:
    """True when both words use the same letters once normalized."""
    a = normalize(first)
    b = normalize(second)
    if len(a) != len(b):
        return False
    return sorted(a) == sorted(b)


def generate_anagrams(
    word: str,
    unique: bool = True,
    *,
    options: GenerateOptions | None = None,
) -> list[str]:
    """
    Generate every rearrangement of the normalized word's letters.

    With `unique` each distinct string appears once, in first-seen order.
    Otherwise all n! permutations are returned, repeats included.
    Passing `options` overrides `unique` and the long-word warning threshold.
    """
    opts = options or GenerateOptions(unique=unique)
    normalized = normalize(word)

    if len(normalized) > opts.warn_threshold:
        logger.warning(
            "Generating anagrams for %r (%d letters) may take a long time",
            word,
            len(normalized),
        )

    anagrams = ("".join(perm) for perm in iter_permutations(normalized))
    if opts.unique:
        return list(dict.fromkeys(anagrams))
    return list(anagrams)


def count_anagrams(word: str) -> int:
    """Number of distinct anagrams: n! / (k1! * k2! * ... * km!)."""
    counts = letter_counts(word)
    total = math.factorial(sum(counts.values()))
    for occurrences in counts.values():
        total //= math.factorial(occurrences)
    return total


def group_anagrams(words: Iterable[str]) -> dict[str, list[str]]:
    """Bucket original words by anagram key, keeping buckets of two or more."""
    buckets: dict[str, list[str]] = defaultdict(list)
    for word in words:
        buckets[anagram_key(word)].append(word)
    return {key: group for key, group in buckets.items() if len(group) > 1}


def shuffle_letters(word: str, rng: random.Random | None = None) -> str:
    """Fisher-Yates shuffle of the word's letters, as given."""
    source = rng or random
    letters = list(word)
    for i in range(len(letters) - 1, 0, -1):
        j = source.randint(0, i)
        letters[i], letters[j] = letters[j], letters[i]
    return "".join(letters)


def random_anagram(word: str, rng: random.Random | None = None) -> str:
    """A single random anagram of the normalized word."""
    return shuffle_letters(normalize(word), rng)


def build_demo_report(rng: random.Random | None = None) -> DemoReport:
    """Run every operation against fixed sample input."""
    comparisons = [
        ComparisonResult(first=a, second=b, are_anagrams=are_anagrams(a, b))
        for a, b in DEMO_COMPARISONS
    ]
    group_input = list(DEMO_GROUP_WORDS)
    return DemoReport(
        comparisons=comparisons,
        sample_word=DEMO_SAMPLE_WORD,
        sample_anagrams=generate_anagrams(DEMO_SAMPLE_WORD),
        sample_count=count_anagrams(DEMO_SAMPLE_WORD),
        shuffle_source=DEMO_SHUFFLE_WORD,
        shuffled=random_anagram(DEMO_SHUFFLE_WORD, rng),
        group_input=group_input,
        groups=group_anagrams(group_input),
        examples=ITALIAN_ANAGRAM_EXAMPLES,
    )
