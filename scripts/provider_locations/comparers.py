"""Locale-invariant, case-insensitive string comparison.

Region names come back from ARM in mixed spellings ("East US", "east us").
All equality, dedup and ordering of those names goes through this module so
the behaviour never depends on the process locale.
"""

from __future__ import annotations

from typing import Iterable, Iterator


class InvariantIgnoreCase:
    """Equality and ordering over Unicode case-folded strings."""

    @staticmethod
    def key(value: str) -> str:
        return value.casefold()

    @classmethod
    def equals(cls, left: str | None, right: str | None) -> bool:
        if left is None or right is None:
            return left is right
        return cls.key(left) == cls.key(right)

    @classmethod
    def sort_key(cls, value: str) -> tuple[str, str]:
        # ordinal on the folded form, raw string breaks ties
        return cls.key(value), value

    @classmethod
    def distinct(cls, values: Iterable[str]) -> list[str]:
        """Drop case-insensitive duplicates, keeping the first spelling seen."""
        seen: set[str] = set()
        result: list[str] = []
        for value in values:
            k = cls.key(value)
            if k in seen:
                continue
            seen.add(k)
            result.append(value)
        return result

    @classmethod
    def sort(cls, values: Iterable[str]) -> list[str]:
        return sorted(values, key=cls.sort_key)


def iter_folded(values: Iterable[str]) -> Iterator[str]:
    """Yield the comparison key of each value."""
    for value in values:
        yield InvariantIgnoreCase.key(value)
