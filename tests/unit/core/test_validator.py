from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Type coercion (String to Bool).
2. Default value injection.
3. Backend and log level normalization.
4. Strict mode validation.
"""

import pytest

from zabb.core.validator import validate_config


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg["backend"] == "auto"
    assert cfg["shortest"] is False
    assert len(warnings) > 0


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["all"] is False
    assert cfg["log_level"] == "WARNING"
    assert warnings == []


def test_validate_converts_strings_to_bools() -> None:
    cfg, warnings = validate_config({"shortest": "yes", "all": "0"})

    assert cfg["shortest"] is True
    assert cfg["all"] is False
    assert len(warnings) == 2


def test_backend_is_normalized() -> None:
    cfg, _ = validate_config({"backend": " ZOXIDE "})
    assert cfg["backend"] == "zoxide"


def test_unknown_backend_falls_back_to_auto() -> None:
    cfg, warnings = validate_config({"backend": "autojump"})

    assert cfg["backend"] == "auto"
    assert any("autojump" in w for w in warnings)


def test_log_level_is_upper_cased() -> None:
    cfg, warnings = validate_config({"log_level": "debug"})

    assert cfg["log_level"] == "DEBUG"
    assert warnings == []


def test_unknown_keys_are_dropped() -> None:
    cfg, _ = validate_config({"colour": "red"})
    assert "colour" not in cfg


def test_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config({"shortest": "maybe"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"backend": "autojump"}, strict=True)
    with pytest.raises(TypeError):
        validate_config([], strict=True)
