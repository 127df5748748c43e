from __future__ import annotations

"""
Candidate Safety Filter.

Rejects fragments that cannot be handed to the oracle as a plain search
term. The check is a pure function of the fragment and runs before every
oracle query.
"""

from typing import Optional

from zabb.domain.constants import HOME_SHORTCUT, RESERVED_ORACLE_FLAGS


def dangerous_reason(text: str) -> Optional[str]:
    """
    Explain why a fragment must not be queried.

    Args:
        text: Candidate fragment.

    Returns:
        Optional[str]: Human readable reason, or None if the fragment is safe.
    """
    if not text:
        return "empty fragment"
    if "".join(text.split()) != text:
        return f"whitespace is a bad abbreviation ({text!r})"
    if text in RESERVED_ORACLE_FLAGS:
        return f"{text} is an oracle flag and cannot be queried"
    if text == HOME_SHORTCUT:
        return "tilde is a bad abbreviation"
    if text.startswith(HOME_SHORTCUT):
        return f"starting with tilde is a bad abbreviation ({text!r})"
    return None


def is_dangerous(text: str) -> bool:
    return dangerous_reason(text) is not None
