from __future__ import annotations

"""
Single Letter Enumeration.

Diagnostic sweep listing where each letter of the alphabet currently jumps
to. Independent of any target directory.
"""

from typing import Iterator

from zabb.core.oracle.base import OracleClient
from zabb.domain.constants import ONE_LETTER_ALPHABET
from zabb.domain.search_models import LetterMatch


def iter_one_letter_matches(oracle: OracleClient, alphabet: str = ONE_LETTER_ALPHABET) -> Iterator[LetterMatch]:
    """
    Query every letter in order, yielding only the ones that resolve.

    Args:
        oracle: Resolved oracle client.
        alphabet: Letters to sweep, 'a' through 'z' by default.

    Yields:
        LetterMatch: Letter and the path the oracle returned, unmodified.
    """
    for letter in alphabet:
        response = oracle.query(letter)
        if response.ok:
            yield LetterMatch(letter=letter, path=response.path or "")
