from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, persisted file, CLI overrides), oracle backend resolution, and
dispatch to the abbreviation search or the one-letter sweep. Maps every
outcome to its process exit code.
"""

import argparse
import json
import sys
from typing import Any, Callable, Dict, List, Optional

from zabb.core.oracle import OracleClient, resolve_oracle
from zabb.core.search import AbbreviationSearchEngine, iter_one_letter_matches
from zabb.core.validator import validate_config
from zabb.domain import constants as const
from zabb.domain.config import get_config_file, get_default_config, load_config, save_config
from zabb.domain.search_models import (
    InvalidTargetError,
    OracleUnavailableError,
    SearchMode,
    TierResult,
)
from zabb.infra.logging import LoggingConfig, configure_logging, get_logger
from zabb.interface.cli import args as cli_args
from zabb.utils.i18n import i18n

logger = get_logger(__name__)
trace_logger = get_logger("zabb.trace")

Action = Callable[[argparse.Namespace, Dict[str, Any]], int]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing phase (usage errors exit with EXIT_USAGE)
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap, refined once the configuration is known
    configure_logging(LoggingConfig(level="DEBUG" if args.debug else "WARNING"))

    # 3. Configuration hierarchy: defaults < saved file < flags
    base_conf = get_default_config() if args.use_defaults else load_config()
    base_conf.update(cli_args.args_to_overrides(args))
    conf, warnings = validate_config(base_conf, strict=False)

    configure_logging(
        LoggingConfig(
            level="DEBUG" if args.debug else conf["log_level"],
            log_file=conf["log_file"] or None,
        ),
        force=True,
    )
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(conf)
        print(i18n.t("cli.status.saved", path=get_config_file()), file=sys.stderr)

    # 4. Action dispatch
    action_name = cli_args.resolve_action(args)
    action = _ACTIONS.get(action_name)
    if action is None:
        _error(i18n.t("cli.errors.unexpected_flag", flag=action_name))
        return const.EXIT_UNEXPECTED_FLAG

    try:
        return action(args, conf)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        return const.EXIT_INTERRUPTED


# -----------------------------------------------------------------------------
# ACTIONS
# -----------------------------------------------------------------------------

def _dump_config(args: argparse.Namespace, conf: Dict[str, Any]) -> int:
    print(json.dumps(conf, ensure_ascii=False, indent=2))
    return const.EXIT_OK


def _one_letter(args: argparse.Namespace, conf: Dict[str, Any]) -> int:
    oracle = _resolve_oracle(conf)
    if oracle is None:
        return const.EXIT_ORACLE_UNAVAILABLE

    if args.json_output:
        letters = [
            {"letter": m.letter, "path": m.path}
            for m in iter_one_letter_matches(oracle)
        ]
        print(json.dumps({"letters": letters}, ensure_ascii=False, indent=2))
        return const.EXIT_OK

    for match in iter_one_letter_matches(oracle):
        print(f"{match.letter} {match.path}", flush=True)
    return const.EXIT_OK


def _search(args: argparse.Namespace, conf: Dict[str, Any]) -> int:
    oracle = _resolve_oracle(conf)
    if oracle is None:
        return const.EXIT_ORACLE_UNAVAILABLE

    mode = SearchMode.from_flags(shortest=conf["shortest"], all_tiers=conf["all"])
    trace = trace_logger.debug if args.debug else None
    engine = AbbreviationSearchEngine(oracle, trace=trace)

    on_tier = None if args.json_output else _print_tier

    try:
        result = engine.run(args.directory, mode, on_tier=on_tier)
    except InvalidTargetError as e:
        logger.debug(f"Invalid target: {e}")
        _error(i18n.t("cli.errors.invalid_target", path=e.path))
        return const.EXIT_INVALID_TARGET

    if args.json_output:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))

    if not result.found:
        _error(i18n.t("cli.errors.no_abbreviation", basename=result.basename))
        return const.EXIT_NO_ABBREVIATION

    return const.EXIT_OK


_ACTIONS: Dict[str, Action] = {
    cli_args.ACTION_SEARCH: _search,
    cli_args.ACTION_ONE_LETTER: _one_letter,
    cli_args.ACTION_DUMP_CONFIG: _dump_config,
}

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _resolve_oracle(conf: Dict[str, Any]) -> Optional[OracleClient]:
    """Resolve the configured backend, reporting a missing one on stderr."""
    try:
        return resolve_oracle(conf["backend"])
    except OracleUnavailableError as e:
        logger.debug(str(e))
        if e.backend == const.BACKEND_AUTO:
            _error(i18n.t("cli.errors.no_backend"))
        else:
            _error(i18n.t("cli.errors.backend_missing", backend=e.backend))
        return None


def _print_tier(tier: TierResult) -> None:
    for abbreviation in tier.abbreviations:
        print(abbreviation, flush=True)


def _error(message: str) -> None:
    print(message, file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
