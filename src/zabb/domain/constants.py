from __future__ import annotations

"""
Domain Constants.

Centralizes process exit codes, the oracle argument values that can never be
used as a query, and the supported backend identifiers.
"""

import string
from typing import Tuple

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# EXIT CODES
# -----------------------------------------------------------------------------
EXIT_OK = 0
EXIT_NO_ABBREVIATION = 1
EXIT_ORACLE_UNAVAILABLE = 2
EXIT_USAGE = 3
EXIT_UNEXPECTED_FLAG = 4
EXIT_INVALID_TARGET = 5
EXIT_CRASH = 70
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ORACLE CONSTRAINTS
# -----------------------------------------------------------------------------

# Parsed as options by the oracle, never as search terms
RESERVED_ORACLE_FLAGS: Tuple[str, ...] = ("-i", "-s")

HOME_SHORTCUT = "~"

ONE_LETTER_ALPHABET: str = string.ascii_lowercase

# -----------------------------------------------------------------------------
# BACKEND REGISTRY KEYS
# -----------------------------------------------------------------------------
BACKEND_AUTO = "auto"
BACKEND_ZOXIDE = "zoxide"
BACKEND_FASD = "fasd"

# Discovery order used when the backend is "auto"
BACKEND_PRIORITY: Tuple[str, ...] = (BACKEND_ZOXIDE, BACKEND_FASD)
