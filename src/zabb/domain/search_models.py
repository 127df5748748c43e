from __future__ import annotations

"""
Search Domain Data Models.

Defines the value objects exchanged between the candidate generator, the
oracle backends, the search engine and the interface layer, together with
the fatal error taxonomy raised before a search begins.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

# -----------------------------------------------------------------------------
# ERROR TAXONOMY
# -----------------------------------------------------------------------------

class ZabbError(Exception):
    """Base class for fatal, pre-search failures."""


class OracleUnavailableError(ZabbError):
    """No supported jump backend is installed on this host."""

    def __init__(self, backend: str, tried: Tuple[str, ...] = ()):
        self.backend = backend
        self.tried = tried
        names = ", ".join(tried) if tried else backend
        super().__init__(f"No usable jump backend found (tried: {names})")


class InvalidTargetError(ZabbError):
    """The requested target does not resolve to an existing directory."""

    def __init__(self, path: str, reason: str = "not a valid, existing directory"):
        self.path = path
        self.reason = reason
        super().__init__(f"{path} is {reason}")


# -----------------------------------------------------------------------------
# SEARCH MODES
# -----------------------------------------------------------------------------

class SearchMode(str, Enum):
    """
    Candidate scope and termination policy of one search.

    PREFIX only considers fragments starting at offset 0 and stops at the
    first tier with a hit. SHORTEST widens the scope to every offset. ALL
    also considers every offset and keeps going through every tier.
    """
    PREFIX = "prefix"
    SHORTEST = "shortest"
    ALL = "all"

    @property
    def search_all_offsets(self) -> bool:
        return self is not SearchMode.PREFIX

    @property
    def exhaustive(self) -> bool:
        return self is SearchMode.ALL

    @classmethod
    def from_flags(cls, shortest: bool = False, all_tiers: bool = False) -> "SearchMode":
        if all_tiers:
            return cls.ALL
        if shortest:
            return cls.SHORTEST
        return cls.PREFIX


# -----------------------------------------------------------------------------
# CORE VALUE OBJECTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Candidate:
    """
    Contiguous fragment of a lower-cased directory basename.

    Attributes:
        offset: Start index inside the basename.
        length: Fragment length (tier number).
        text: The fragment itself, exactly as it will be queried.
    """
    offset: int
    length: int
    text: str


@dataclass(frozen=True)
class OracleResponse:
    """
    Outcome of a single oracle query.

    A missing ``path`` means the query failed (non-zero exit, empty output or
    launch error); ``error`` then carries a short reason for debug tracing.
    """
    query: str
    path: Optional[str] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return bool(self.path)


@dataclass(frozen=True)
class TierResult:
    """Deduplicated abbreviations verified at one fragment length."""
    length: int
    abbreviations: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class SearchResult:
    """
    Final outcome of an abbreviation search.

    Attributes:
        target: Canonical path of the directory searched for.
        basename: Lower-cased final segment of ``target``.
        mode: Search mode the engine ran with.
        tiers: Tiers that produced at least one abbreviation, ascending.
    """
    target: str
    basename: str
    mode: SearchMode
    tiers: List[TierResult] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return any(t.abbreviations for t in self.tiers)

    @property
    def abbreviations(self) -> List[str]:
        return [a for t in self.tiers for a in t.abbreviations]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target": self.target,
            "basename": self.basename,
            "mode": self.mode.value,
            "found": self.found,
            "tiers": [
                {"length": t.length, "abbreviations": list(t.abbreviations)}
                for t in self.tiers
            ],
        }


@dataclass(frozen=True)
class LetterMatch:
    """Directory the oracle currently resolves a single letter to."""
    letter: str
    path: str
