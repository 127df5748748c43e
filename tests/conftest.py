from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An isolated home directory so no test touches the real config file.
3. A scriptable in-memory oracle recording every query it receives.
"""

import logging
import os
import sys
from logging.handlers import QueueListener
from pathlib import Path
from typing import Dict, List, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from zabb.core.oracle.base import OracleClient  # noqa: E402
from zabb.domain.search_models import OracleResponse  # noqa: E402
from zabb.infra.logging import (  # noqa: E402
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
)


# -----------------------------------------------------------------------------
# Test Doubles
# -----------------------------------------------------------------------------
class FakeOracle(OracleClient):
    """
    Oracle answering from a fixed fragment -> path table.

    Fragments missing from the table fail like a non-zero oracle exit.
    """

    name = "fake"

    def __init__(self, answers: Optional[Dict[str, str]] = None):
        self.answers: Dict[str, str] = dict(answers or {})
        self.calls: List[str] = []

    def query(self, text: str) -> OracleResponse:
        self.calls.append(text)
        path = self.answers.get(text)
        if path is None:
            return OracleResponse(query=text, error="exit status 1")
        return OracleResponse(query=text, path=path)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user data directory at a throwaway location."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home))
    return home


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach our root handlers so each test starts unconfigured."""
    yield
    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if isinstance(listener, QueueListener) and getattr(listener, "_thread", None) is not None:
        listener.stop()
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()

    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


@pytest.fixture
def jump_dirs(tmp_path: Path) -> Dict[str, str]:
    """
    Create sibling directories commonly found in a home folder.

    Returns:
        Dict[str, str]: Directory name -> canonical absolute path.
    """
    root = tmp_path / "jump"
    out: Dict[str, str] = {}
    for name in ("Documents", "Downloads", "Desktop", "bananas"):
        d = root / name
        d.mkdir(parents=True)
        out[name] = os.path.realpath(str(d))
    return out


@pytest.fixture
def fake_oracle_factory():
    return FakeOracle
