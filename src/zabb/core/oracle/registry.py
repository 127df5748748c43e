from __future__ import annotations

"""
Oracle Backend Registry.

Maps backend identifiers to their implementation and resolves, once per
process, which installed backend the search engine will be given.
"""

import logging
from typing import Callable, Dict, Optional, Tuple, Type

from zabb.core.oracle.base import CommandOracle
from zabb.core.oracle.fasd import FasdOracle
from zabb.core.oracle.zoxide import ZoxideOracle
from zabb.domain.constants import BACKEND_AUTO, BACKEND_PRIORITY
from zabb.domain.search_models import OracleUnavailableError

logger = logging.getLogger(__name__)

BACKENDS: Dict[str, Type[CommandOracle]] = {
    ZoxideOracle.name: ZoxideOracle,
    FasdOracle.name: FasdOracle,
}

Locator = Callable[[Type[CommandOracle]], Optional[str]]


def _default_locator(backend_cls: Type[CommandOracle]) -> Optional[str]:
    return backend_cls.locate()


def resolve_oracle(
        backend: str = BACKEND_AUTO,
        *,
        locator: Locator = _default_locator,
) -> CommandOracle:
    """
    Build the oracle client for the requested backend.

    With ``backend == "auto"`` the backends are tried in priority order and
    the first installed one wins.

    Args:
        backend: Backend identifier or "auto".
        locator: Returns the executable path of a backend class, or None.

    Returns:
        CommandOracle: Ready-to-query client.

    Raises:
        OracleUnavailableError: If no candidate backend is installed.
        ValueError: If the backend identifier is unknown.
    """
    key = (backend or BACKEND_AUTO).strip().lower()

    if key == BACKEND_AUTO:
        candidates: Tuple[str, ...] = BACKEND_PRIORITY
    elif key in BACKENDS:
        candidates = (key,)
    else:
        raise ValueError(f"Unknown oracle backend: {backend!r}")

    for name in candidates:
        backend_cls = BACKENDS[name]
        path = locator(backend_cls)
        if path:
            logger.debug(f"Using oracle backend '{name}' at {path}")
            return backend_cls(path)
        logger.debug(f"Oracle backend '{name}' not installed.")

    raise OracleUnavailableError(key, candidates)
