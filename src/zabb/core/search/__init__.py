from __future__ import annotations

from .aggregator import ResultAggregator
from .engine import AbbreviationSearchEngine
from .generator import iter_tier, iter_tiers
from .one_letter import iter_one_letter_matches
from .safety import dangerous_reason, is_dangerous

__all__ = [
    "AbbreviationSearchEngine",
    "ResultAggregator",
    "iter_tier",
    "iter_tiers",
    "iter_one_letter_matches",
    "dangerous_reason",
    "is_dangerous",
]
