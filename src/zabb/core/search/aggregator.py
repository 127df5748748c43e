from __future__ import annotations

"""
Verified Abbreviation Aggregator.

Collects (tier, text) matches in discovery order and keeps, per tier, the
first occurrence of each distinct text.
"""

from typing import Dict, List

from zabb.domain.search_models import TierResult


class ResultAggregator:
    """
    Per-search buffer of verified abbreviations.

    The same substring can occur at several offsets of a basename; only its
    first-seen position is kept.
    """

    def __init__(self) -> None:
        self._tiers: Dict[int, List[str]] = {}

    def add(self, length: int, text: str) -> bool:
        """
        Record a verified abbreviation.

        Returns:
            bool: False if the text was already recorded in this tier.
        """
        bucket = self._tiers.setdefault(length, [])
        if text in bucket:
            return False
        bucket.append(text)
        return True

    def tier(self, length: int) -> TierResult:
        return TierResult(length=length, abbreviations=list(self._tiers.get(length, [])))

    def has_tier(self, length: int) -> bool:
        return bool(self._tiers.get(length))

    def tiers(self) -> List[TierResult]:
        return [self.tier(length) for length in sorted(self._tiers) if self._tiers[length]]

    @property
    def found(self) -> bool:
        return any(self._tiers.values())
