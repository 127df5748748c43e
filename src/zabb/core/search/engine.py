from __future__ import annotations

"""
Abbreviation Search Engine.

Drives the search for the shortest fragments of a directory name that the
jump oracle resolves back to that directory:

1. Canonicalizes the target and lower-cases its basename.
2. Walks the candidate tiers, shortest first.
3. Skips fragments rejected by the safety filter, then queries the oracle.
4. Canonicalizes each answer and keeps the fragments that land on the target.
5. Stops after the first tier with a hit, unless the mode is exhaustive.

Per-candidate failures never abort the search. Only an invalid target
(raised before any query) escapes.
"""

import logging
from typing import Callable, Optional

from zabb.core.oracle.base import OracleClient
from zabb.core.search.aggregator import ResultAggregator
from zabb.core.search.generator import iter_tiers
from zabb.core.search.safety import dangerous_reason
from zabb.domain.search_models import (
    InvalidTargetError,
    SearchMode,
    SearchResult,
    TierResult,
)
from zabb.infra.fs import canonicalize, directory_basename, resolve_target_directory

logger = logging.getLogger(__name__)

TraceSink = Callable[[str], None]
TierCallback = Callable[[TierResult], None]


class AbbreviationSearchEngine:
    """
    Sequential abbreviation search against an injected oracle.

    Args:
        oracle: Client already resolved for an installed backend.
        trace: Optional sink receiving one message per skipped candidate.
        resolver: Canonicalizes oracle answers; raises InvalidTargetError
                  for paths that no longer exist.
    """

    def __init__(
            self,
            oracle: OracleClient,
            *,
            trace: Optional[TraceSink] = None,
            resolver: Callable[[str], str] = canonicalize,
    ):
        self._oracle = oracle
        self._trace = trace
        self._resolver = resolver

    def run(
            self,
            directory: Optional[str] = None,
            mode: SearchMode = SearchMode.PREFIX,
            *,
            on_tier: Optional[TierCallback] = None,
    ) -> SearchResult:
        """
        Search abbreviations for ``directory`` (the working directory if None).

        Args:
            directory: Target directory, absolute or relative.
            mode: Candidate scope and termination policy.
            on_tier: Called with each tier that produced abbreviations,
                     as soon as that tier completes.

        Returns:
            SearchResult: Verified abbreviations grouped by tier.

        Raises:
            InvalidTargetError: If the target is not an existing directory.
        """
        target = resolve_target_directory(directory)
        basename = directory_basename(target)
        logger.debug(f"Searching {mode.value} abbreviations for {target} ({basename!r})")

        aggregator = ResultAggregator()

        for length, tier in enumerate(iter_tiers(basename, mode.search_all_offsets), start=1):
            for candidate in tier:
                if self._verify(candidate.text, target):
                    aggregator.add(length, candidate.text)

            if not aggregator.has_tier(length):
                continue

            completed = aggregator.tier(length)
            if on_tier is not None:
                on_tier(completed)
            if not mode.exhaustive:
                break

        if not aggregator.found:
            logger.debug(f"No abbreviation found for {basename!r}")

        return SearchResult(
            target=target,
            basename=basename,
            mode=mode,
            tiers=aggregator.tiers(),
        )

    def _verify(self, text: str, target: str) -> bool:
        """Query one fragment and check that it lands on the target."""
        reason = dangerous_reason(text)
        if reason is not None:
            self._emit(reason)
            return False

        response = self._oracle.query(text)
        if not response.ok:
            self._emit(f"{text!r}: no match ({response.error})")
            return False

        try:
            found = self._resolver(response.path or "")
        except InvalidTargetError:
            self._emit(f"{text!r}: resolved to missing path {response.path}")
            return False

        if found != target:
            self._emit(f"{text!r}: resolves to {found}")
            return False
        return True

    def _emit(self, message: str) -> None:
        if self._trace is not None:
            self._trace(message)
