"""Command line entry point.

    audit-locale show [--json]
    audit-locale env
    audit-locale run [--sterile|--locale-only] [--timeout SECONDS] -- COMMAND [ARGS...]

Logs go to stderr; stdout carries only the requested output or the wrapped
command's own output. ``run`` exits with the child's exit code.
"""

import argparse
import json
import sys
from typing import List, Optional

from infrastructure.configuration import Settings
from infrastructure.execution import (
    ExitOutcome,
    ProcessSpec,
    build_environment,
    ensure_sterile,
    run_sterile,
    with_locale,
)
from infrastructure.locales import get_locale_selection
from infrastructure.logging import bind_run_context, configure_logging, get_module_logger
from infrastructure.services import get_settings

logger = get_module_logger()

# Shell conventions for commands that never ran.
EXIT_TIMEOUT = 124
EXIT_CANNOT_EXECUTE = 126
EXIT_NOT_FOUND = 127


def exit_code_for(outcome: ExitOutcome) -> int:
    """Map an outcome to this program's exit status."""
    if outcome.launched:
        return outcome.returncode if outcome.returncode is not None else 0
    if outcome.error_code == "NOT_FOUND":
        return EXIT_NOT_FOUND
    if outcome.error_code == "TIMEOUT":
        return EXIT_TIMEOUT
    return EXIT_CANNOT_EXECUTE


def show(args: argparse.Namespace, settings: Settings) -> int:
    selection = get_locale_selection()
    variables = selection.as_environment()
    if args.json:
        print(
            json.dumps(
                {
                    "message_locale": selection.message_locale,
                    "time_locale": selection.time_locale,
                    "numeric_locale": selection.numeric_locale,
                    "environment": variables,
                },
                sort_keys=True,
            )
        )
    else:
        for name in sorted(variables):
            print(f"{name}={variables[name]}")
    return 0


def env(args: argparse.Namespace, settings: Settings) -> int:
    sterile = build_environment(get_locale_selection(), settings=settings)
    for name in sorted(sterile):
        print(f"{name}={sterile[name]}")
    return 0


def run(args: argparse.Namespace, settings: Settings) -> int:
    command = list(args.cmd)
    if command and command[0] == "--":
        command = command[1:]
    if not command:
        print("run: missing command", file=sys.stderr)
        return 2

    selection = get_locale_selection()
    target = ProcessSpec.command(command[0], *command[1:])
    if args.locale_only:
        outcome = with_locale(
            selection, target, timeout=args.timeout, capture_output=False
        )
    else:
        outcome = run_sterile(
            target,
            selection,
            settings=settings,
            timeout=args.timeout,
            capture_output=False,
        )

    if not outcome.launched:
        print(f"run: {outcome.message}", file=sys.stderr)
    return exit_code_for(outcome)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="audit-locale",
        description="Resolve deterministic locales and run commands in a sterile environment.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log at DEBUG level"
    )
    parser.add_argument(
        "--reexec",
        action="store_true",
        help="Re-run this program in a sterile environment before doing anything",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser("show", help="Print the resolved locale selection")
    show_parser.add_argument("--json", action="store_true", help="Print JSON")
    show_parser.set_defaults(handler=show)

    env_parser = subparsers.add_parser("env", help="Print the sterile environment")
    env_parser.set_defaults(handler=env)

    run_parser = subparsers.add_parser("run", help="Run a command")
    isolation = run_parser.add_mutually_exclusive_group()
    isolation.add_argument(
        "--sterile",
        action="store_true",
        help="Run with the minimal sterile environment (default)",
    )
    isolation.add_argument(
        "--locale-only",
        action="store_true",
        help="Keep the current environment and pin only the locale variables",
    )
    run_parser.add_argument(
        "--timeout", type=float, default=None, help="Kill the command after SECONDS"
    )
    run_parser.add_argument("cmd", nargs=argparse.REMAINDER, help="Command and arguments")
    run_parser.set_defaults(handler=run)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the command line interface."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings, log_level="DEBUG" if args.verbose else None)

    with bind_run_context(command=args.command):
        if args.reexec:
            outcome = ensure_sterile(get_locale_selection(), settings=settings)
            if outcome is not None:
                print(f"reexec: {outcome.message}", file=sys.stderr)
                return exit_code_for(outcome)
        return args.handler(args, settings)


def entrypoint() -> None:
    sys.exit(main())


if __name__ == "__main__":
    entrypoint()
