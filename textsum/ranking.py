from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping


@dataclass(frozen=True, slots=True)
class RankedEntry:
    word: str
    count: int

    def __iter__(self) -> Iterator[object]:
        yield self.word
        yield self.count


def group_by_count(frequencies: Mapping[str, int]) -> dict[int, list[str]]:
    """Invert a word -> count mapping into count -> words."""
    buckets: dict[int, list[str]] = defaultdict(list)
    for word, count in frequencies.items():
        buckets[count].append(word)
    return dict(buckets)


def rank(tokens: Iterable[str], n: int) -> list[RankedEntry]:
    """
    Return the n most common tokens, most common first.

    Counting is case-sensitive. Tokens sharing a count are ordered
    alphabetically ignoring case; when a count group does not fit in the
    remaining slots, only its alphabetically earliest tokens are kept.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise ValueError(f"n must be > 0, got {n!r}")

    frequencies = Counter(tokens)
    if not frequencies:
        return []

    buckets = group_by_count(frequencies)
    ranked: list[RankedEntry] = []
    for count in sorted(buckets, reverse=True):
        remaining = n - len(ranked)
        if remaining <= 0:
            break
        words = sorted(buckets[count], key=lambda word: (word.lower(), word))
        ranked.extend(RankedEntry(word, count) for word in words[:remaining])
    return ranked
