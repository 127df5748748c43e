from __future__ import annotations

"""
Base Definitions for Jump Oracles.

An oracle is an external frecency-ranked jump tool queried with a single
fragment. It either resolves the fragment to one directory or fails; both
outcomes are returned as an OracleResponse, never raised.
"""

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from zabb.domain.search_models import OracleResponse

logger = logging.getLogger(__name__)


class OracleClient(ABC):
    """
    Abstract synchronous query interface of a jump oracle.
    """

    name: str = ""

    @abstractmethod
    def query(self, text: str) -> OracleResponse:
        """
        Ask the oracle for its best match for ``text``.

        Args:
            text: Query fragment, passed verbatim.

        Returns:
            OracleResponse: The resolved path, or the failure reason.
        """
        pass


class CommandOracle(OracleClient):
    """
    Oracle backed by a command line tool printing its match on stdout.

    Subclasses declare the executable and the arguments preceding the query.
    The command runs without a shell, so the fragment is never re-parsed.
    """

    executable: str = ""
    query_args: Tuple[str, ...] = ()

    def __init__(self, executable_path: Optional[str] = None):
        self._executable_path = executable_path or self.executable

    @classmethod
    def locate(cls) -> Optional[str]:
        """Absolute path of the backing executable, or None if not installed."""
        return shutil.which(cls.executable)

    def build_command(self, text: str) -> List[str]:
        return [self._executable_path, *self.query_args, text]

    def query(self, text: str) -> OracleResponse:
        cmd = self.build_command(text)
        try:
            proc = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.debug(f"Oracle launch failed for {text!r}: {e}")
            return OracleResponse(query=text, error=f"launch failed: {e}")

        if proc.returncode != 0:
            return OracleResponse(query=text, error=f"exit status {proc.returncode}")

        lines = _output_lines(proc.stdout)
        if not lines:
            return OracleResponse(query=text, error="empty output")
        if len(lines) > 1:
            return OracleResponse(query=text, error="multiple lines")
        return OracleResponse(query=text, path=lines[0])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._executable_path!r})"


def _output_lines(output: str) -> List[str]:
    # A successful answer is exactly one directory path
    return [line for line in (output or "").splitlines() if line.strip()]
