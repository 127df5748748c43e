from __future__ import annotations

"""
Unit tests for the command-backed oracle clients.

Uses small shell scripts standing in for the real jump tools.
"""

import stat
import sys
from pathlib import Path

import pytest

from zabb.core.oracle.base import CommandOracle
from zabb.core.oracle.fasd import FasdOracle
from zabb.core.oracle.zoxide import ZoxideOracle
from zabb.core.search.engine import AbbreviationSearchEngine
from zabb.domain.search_models import SearchMode

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell scripts")


def _script(tmp_path: Path, name: str, body: str) -> str:
    path = tmp_path / name
    path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)


def test_zoxide_command_line() -> None:
    assert ZoxideOracle("/usr/bin/zoxide").build_command("doc") == ["/usr/bin/zoxide", "query", "doc"]


def test_fasd_command_line() -> None:
    assert FasdOracle("/usr/bin/fasd").build_command("doc") == ["/usr/bin/fasd", "-l", "-1", "doc"]


def test_success_returns_single_output_line(tmp_path: Path) -> None:
    exe = _script(tmp_path, "zoxide", 'printf "\\n/home/u/Documents\\n\\n"\n')

    response = ZoxideOracle(exe).query("doc")

    assert response.ok is True
    assert response.path == "/home/u/Documents"
    assert response.query == "doc"


def test_multiple_output_lines_are_a_failure(tmp_path: Path) -> None:
    exe = _script(tmp_path, "zoxide", 'printf "/home/u/Documents\\n/home/u/other\\n"\n')

    response = ZoxideOracle(exe).query("doc")

    assert response.ok is False
    assert response.path is None
    assert response.error == "multiple lines"


def test_listing_flag_fragment_is_not_an_abbreviation(tmp_path: Path) -> None:
    """`zoxide query -l` lists every entry; the listing must not count as a jump."""
    target = tmp_path / "my-lib"
    target.mkdir()
    other = tmp_path / "other"
    other.mkdir()
    exe = _script(
        tmp_path,
        "zoxide",
        f'if [ "$2" = "-l" ]; then printf "%s\\n%s\\n" "{target}" "{other}"; exit 0; fi\nexit 1\n',
    )

    result = AbbreviationSearchEngine(ZoxideOracle(exe)).run(str(target), SearchMode.SHORTEST)

    assert "-l" not in result.abbreviations
    assert result.found is False


def test_query_text_is_passed_verbatim(tmp_path: Path) -> None:
    """No shell re-parses the fragment: metacharacters arrive unchanged."""
    exe = _script(tmp_path, "zoxide", 'printf "%s\\n" "$2"\n')

    response = ZoxideOracle(exe).query("$(x);*")

    assert response.path == "$(x);*"


def test_non_zero_exit_is_a_failure(tmp_path: Path) -> None:
    exe = _script(tmp_path, "zoxide", 'echo "/somewhere"\nexit 1\n')

    response = ZoxideOracle(exe).query("zz")

    assert response.ok is False
    assert response.path is None
    assert "exit status 1" in response.error


def test_empty_output_is_a_failure(tmp_path: Path) -> None:
    exe = _script(tmp_path, "fasd", "exit 0\n")

    response = FasdOracle(exe).query("zz")

    assert response.ok is False
    assert response.error == "empty output"


def test_launch_error_is_a_failure(tmp_path: Path) -> None:
    response = ZoxideOracle(str(tmp_path / "missing-binary")).query("a")

    assert response.ok is False
    assert "launch failed" in response.error


def test_locate_uses_path_lookup(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _script(tmp_path, "zoxide", "exit 0\n")
    monkeypatch.setenv("PATH", str(tmp_path))

    assert ZoxideOracle.locate() == str(tmp_path / "zoxide")
    assert FasdOracle.locate() is None


def test_custom_command_oracle_subclass() -> None:
    class Custom(CommandOracle):
        executable = "custom"
        query_args = ("--best",)

    assert Custom().build_command("x") == ["custom", "--best", "x"]


def test_query_args_default_is_immutable() -> None:
    assert CommandOracle.query_args == ()
    assert isinstance(ZoxideOracle.query_args, tuple)
    assert isinstance(FasdOracle.query_args, tuple)
