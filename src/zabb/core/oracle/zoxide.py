from __future__ import annotations

"""
zoxide Oracle Backend.
"""

from zabb.core.oracle.base import CommandOracle
from zabb.domain.constants import BACKEND_ZOXIDE


class ZoxideOracle(CommandOracle):
    """Resolves fragments with ``zoxide query <fragment>``."""

    name = BACKEND_ZOXIDE
    executable = "zoxide"
    query_args = ("query",)
