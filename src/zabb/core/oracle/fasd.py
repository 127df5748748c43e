from __future__ import annotations

"""
fasd Oracle Backend.
"""

from zabb.core.oracle.base import CommandOracle
from zabb.domain.constants import BACKEND_FASD


class FasdOracle(CommandOracle):
    """Resolves fragments with ``fasd -l -1 <fragment>`` (single best entry)."""

    name = BACKEND_FASD
    executable = "fasd"
    query_args = ("-l", "-1")
