from __future__ import annotations

"""
Unit tests for the Candidate Fragment Generator.

Verifies:
1. Prefix mode yields exactly the prefix of each length.
2. All-offsets mode yields every contiguous substring, ascending offset.
3. Tiers and fragments are produced lazily.
"""

import pytest

from zabb.core.search.generator import iter_tier, iter_tiers


@pytest.mark.parametrize("basename", ["documents", "a", "aaa", "x-y z"])
def test_prefix_mode_yields_one_prefix_per_tier(basename: str) -> None:
    tiers = [list(t) for t in iter_tiers(basename, search_all_offsets=False)]

    assert len(tiers) == len(basename)
    for length, tier in enumerate(tiers, start=1):
        assert [c.text for c in tier] == [basename[:length]]
        assert tier[0].offset == 0
        assert tier[0].length == length


@pytest.mark.parametrize("basename", ["documents", "a", "abab"])
def test_all_offsets_mode_yields_every_substring(basename: str) -> None:
    n = len(basename)
    tiers = [list(t) for t in iter_tiers(basename, search_all_offsets=True)]

    assert len(tiers) == n
    for length, tier in enumerate(tiers, start=1):
        assert [c.offset for c in tier] == list(range(n - length + 1))
        assert [c.text for c in tier] == [basename[o:o + length] for o in range(n - length + 1)]
        assert {c.length for c in tier} == {length}


def test_duplicate_substrings_are_not_collapsed_by_generator() -> None:
    """Deduplication belongs to the aggregator, not the generator."""
    texts = [c.text for c in iter_tier("abab", 2, search_all_offsets=True)]
    assert texts == ["ab", "ba", "ab"]


def test_empty_basename_has_no_tiers() -> None:
    assert list(iter_tiers("", search_all_offsets=True)) == []


def test_generation_is_lazy() -> None:
    """Stopping after the first tier never materializes the others."""
    tiers = iter_tiers("x" * 10_000, search_all_offsets=True)
    first = next(tiers)
    assert next(first).text == "x"
