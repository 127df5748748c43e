from __future__ import annotations

from .base import CommandOracle, OracleClient
from .fasd import FasdOracle
from .registry import BACKENDS, resolve_oracle
from .zoxide import ZoxideOracle

__all__ = [
    "OracleClient",
    "CommandOracle",
    "ZoxideOracle",
    "FasdOracle",
    "BACKENDS",
    "resolve_oracle",
]
