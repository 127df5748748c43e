from __future__ import annotations

"""
Candidate Fragment Generator.

Enumerates the fragments of a basename tier by tier (length 1 up to the
full name). Both the tiers and the fragments inside a tier are produced
lazily so the engine can stop consuming at any point.
"""

from typing import Iterator

from zabb.domain.search_models import Candidate


def iter_tier(basename: str, length: int, search_all_offsets: bool) -> Iterator[Candidate]:
    """
    Fragments of a single length, in ascending offset order.

    Args:
        basename: Lower-cased directory name.
        length: Fragment length, 1..len(basename).
        search_all_offsets: False restricts the tier to the prefix.

    Yields:
        Candidate: One fragment per offset.
    """
    last_offset = len(basename) - length if search_all_offsets else 0
    for offset in range(last_offset + 1):
        yield Candidate(offset=offset, length=length, text=basename[offset:offset + length])


def iter_tiers(basename: str, search_all_offsets: bool) -> Iterator[Iterator[Candidate]]:
    """
    One lazy fragment sequence per length, shortest first.

    An empty basename produces no tiers.
    """
    for length in range(1, len(basename) + 1):
        yield iter_tier(basename, length, search_all_offsets)
