"""
Private Action Loader CLI

Runs the main or post phase of an action stored in a private repository.
Inputs are read from the environment the way GitHub Actions passes them:

    INPUT_PAL-REPO-TOKEN        token with read access to the repository
    INPUT_PAL-REPO-NAME         owner/repo or owner/repo@ref
    INPUT_PAL-ACTION-DIRECTORY  optional subdirectory holding action.yml

Usage:
    private-action main
    private-action post
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from private_action import display
from private_action.config import load_config, parse_cache_policy
from private_action.dispatcher import run_action
from private_action.errors import PrivateActionError
from private_action.types import LifecyclePhase


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="private-action",
        description="Run an action from a private repository",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    INPUT_PAL-REPO-NAME=acme/widgets@v2 private-action main
    private-action post --work-directory /tmp/actions

Settings (environment):
    PAL_WORK_DIRECTORY, PAL_GIT_HOST, PAL_INTERPRETER,
    PAL_CACHE_POLICY, PAL_FAIL_ON_MISSING_INPUTS, PAL_ENTRY_POINT_TIMEOUT
        """,
    )
    parser.add_argument(
        "phase",
        choices=[p.value for p in LifecyclePhase],
        help="Lifecycle phase to run",
    )
    parser.add_argument(
        "--work-directory",
        dest="work_directory",
        default=None,
        help="Root directory for checkouts (default: ./.private-action)",
    )
    parser.add_argument(
        "--cache-policy",
        dest="cache_policy",
        choices=["reuse", "refresh"],
        default=None,
        help="Reuse an existing checkout or clone again (default: reuse)",
    )
    parser.add_argument(
        "--interpreter",
        default=None,
        help="Program used to run entry points (default: node)",
    )
    parser.add_argument(
        "--allow-missing-inputs",
        action="store_true",
        default=False,
        help="Warn instead of failing when a required input has no value",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    phase = LifecyclePhase(args.phase)

    try:
        config = load_config()

        overrides = {}
        if args.work_directory:
            overrides["work_directory"] = Path(args.work_directory)
        if args.cache_policy:
            overrides["cache_policy"] = parse_cache_policy(args.cache_policy)
        if args.interpreter:
            overrides["interpreter"] = args.interpreter
        if args.allow_missing_inputs:
            overrides["fail_on_missing_inputs"] = False
        if overrides:
            config = replace(config, **overrides)

        run_action(config, phase)
    except KeyboardInterrupt:
        display.warning("Aborted")
        sys.exit(130)
    except PrivateActionError as e:
        display.set_failed(str(e))
        sys.exit(1)
    except Exception as e:
        display.set_failed(f"{type(e).__name__}: {e}")
        sys.exit(1)

    display.print_phase_complete(phase.value)


if __name__ == "__main__":
    main()
