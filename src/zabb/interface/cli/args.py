from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed namespaces into
configuration overrides and the action the controller should run.
"""

import argparse
import sys
from typing import Any, Dict, NoReturn

from zabb.domain.constants import BACKEND_AUTO, BACKEND_PRIORITY, EXIT_USAGE
from zabb.utils.i18n import i18n

ACTION_SEARCH = "search"
ACTION_ONE_LETTER = "one_letter"
ACTION_DUMP_CONFIG = "dump_config"


class ZabbArgumentParser(argparse.ArgumentParser):
    """ArgumentParser exiting with the dedicated usage error code."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the zabb CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = ZabbArgumentParser(
        prog="zabb",
        description=i18n.t("app.description"),
        epilog=i18n.t("app.epilog"),
    )

    p.add_argument(
        "directory",
        nargs="?",
        default=None,
        metavar="DIRECTORY",
        help=i18n.t("cli.args.directory"),
    )

    # --- Search Scope ---
    shortest = p.add_mutually_exclusive_group()
    shortest.add_argument(
        "-s", "--shortest",
        action="store_true",
        help=i18n.t("cli.args.shortest"),
    )
    shortest.add_argument(
        "--no-shortest",
        action="store_true",
        help=i18n.t("cli.args.no_shortest"),
    )
    all_tiers = p.add_mutually_exclusive_group()
    all_tiers.add_argument(
        "-a", "--all",
        dest="all_tiers",
        action="store_true",
        help=i18n.t("cli.args.all"),
    )
    all_tiers.add_argument(
        "--no-all",
        dest="no_all_tiers",
        action="store_true",
        help=i18n.t("cli.args.no_all"),
    )
    p.add_argument(
        "-1", "--one-letter",
        dest="one_letter",
        action="store_true",
        help=i18n.t("cli.args.one_letter"),
    )

    # --- Backend Selection ---
    p.add_argument(
        "--backend",
        choices=(BACKEND_AUTO,) + BACKEND_PRIORITY,
        default=None,
        help=i18n.t("cli.args.backend"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "-d", "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help=i18n.t("cli.args.save"),
    )

    return p


# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only flags actually given produce an override, so saved preferences
    survive a plain invocation.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.backend:
        overrides["backend"] = args.backend
    if args.shortest:
        overrides["shortest"] = True
    elif args.no_shortest:
        overrides["shortest"] = False
    if args.all_tiers:
        overrides["all"] = True
    elif args.no_all_tiers:
        overrides["all"] = False

    # --debug is per run and never becomes part of the saved configuration
    return overrides


def resolve_action(args: argparse.Namespace) -> str:
    """Pick the controller action selected by the flags."""
    if args.dump_config:
        return ACTION_DUMP_CONFIG
    if args.one_letter:
        return ACTION_ONE_LETTER
    return ACTION_SEARCH
