"""Data models for anagram options, reference pairs, and demo output."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

DEFAULT_WARN_THRESHOLD = 10


@dataclass(slots=True)
class GenerateOptions:
    """Options controlling anagram generation."""

    unique: bool = True
    warn_threshold: int = DEFAULT_WARN_THRESHOLD


@dataclass(frozen=True, slots=True)
class AnagramPair:
    """A known word and one of its anagrams."""

    original: str
    anagram: str


ITALIAN_ANAGRAM_EXAMPLES: tuple[AnagramPair, ...] = (
    AnagramPair("amor", "roma"),
    AnagramPair("arte", "rate"),
    AnagramPair("cane", "acne"),
    AnagramPair("cosa", "caos"),
    AnagramPair("lago", "gola"),
    AnagramPair("male", "lame"),
    AnagramPair("nave", "vena"),
    AnagramPair("pane", "pena"),
    AnagramPair("riso", "siro"),
    AnagramPair("vita", "vati"),
)


@dataclass(slots=True)
class ComparisonResult:
    """Outcome of one anagram check."""

    first: str
    second: str
    are_anagrams: bool


@dataclass(slots=True)
class DemoReport:
    """Aggregated output of the demo run."""

    comparisons: list[ComparisonResult]
    sample_word: str
    sample_anagrams: list[str]
    sample_count: int
    shuffle_source: str
    shuffled: str
    group_input: list[str]
    groups: dict[str, list[str]]
    examples: tuple[AnagramPair, ...] = ITALIAN_ANAGRAM_EXAMPLES
    generated_at_utc: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    )
