"""Permutation engine used by anagram generation."""

from __future__ import annotations

from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")


def iter_permutations(items: Sequence[T]) -> Iterator[tuple[T, ...]]:
    """
    Yield every ordering of `items`, one per input position arrangement.

    Equal values are not merged, so an n-item input always yields n! tuples.
    Each element is fixed as head in index order and the remaining items are
    permuted with their relative order preserved. An explicit stack replaces
    recursion so depth never depends on input length.
    """
    pool = tuple(items)
    if len(pool) <= 1:
        yield pool
        return

    stack: list[tuple[tuple[T, ...], tuple[T, ...]]] = [((), pool)]
    while stack:
        prefix, remaining = stack.pop()
        if len(remaining) == 1:
            yield prefix + remaining
            continue
        # Pushed in reverse so index 0 is expanded first.
        for idx in range(len(remaining) - 1, -1, -1):
            stack.append((prefix + (remaining[idx],), remaining[:idx] + remaining[idx + 1 :]))


def permutations(items: Sequence[T]) -> list[tuple[T, ...]]:
    """Materialize all n! orderings of `items`."""
    return list(iter_permutations(items))
