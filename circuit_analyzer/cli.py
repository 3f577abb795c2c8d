"""
Command-line interface for the circuit analyzer.

Drive the series/parallel circuit model from a command script or an
interactive Python session.

Usage::

    python -m circuit_analyzer.cli run commands.txt
    python -m circuit_analyzer.cli --frequency 60 run < commands.txt
    python -m circuit_analyzer.cli repl

Script commands (one per line, '#' starts a comment)::

    add <type> <value> <group>     e.g. add resistor 4.7k series
    remove <id>
    find <id>
    list
    undo
    analyze [frequency]
    log
    stats
"""

import argparse
import logging
import shlex
import sys
from dataclasses import replace
from pathlib import Path

from . import __version__
from .controllers.requests import (
    AddComponentRequest,
    AnalyzeRequest,
    FindComponentRequest,
    ListGroupsRequest,
    RemoveComponentRequest,
    RequestHandler,
    UndoRequest,
)
from .errors import CircuitError
from .format_utils import (
    INVALID_VALUE_MESSAGE,
    parse_component_id,
    parse_value,
    validate_component_value,
)
from .models.component import normalize_component_type, normalize_group
from .settings import AnalyzerSettings, load_settings

logger = logging.getLogger(__name__)

COMMAND_USAGE = {
    "add": "add <type> <value> <group>",
    "remove": "remove <id>",
    "find": "find <id>",
    "list": "list",
    "undo": "undo",
    "analyze": "analyze [frequency]",
    "log": "log",
    "stats": "stats",
}


class CommandError(ValueError):
    """Raised when a script line cannot be turned into a request."""


def _format_ids(ids: list[int]) -> str:
    return ", ".join(str(i) for i in ids) if ids else "(empty)"


def _expect_args(name: str, args: list[str], minimum: int, maximum: int) -> None:
    if not minimum <= len(args) <= maximum:
        raise CommandError(f"usage: {COMMAND_USAGE[name]}")


def execute_command(handler: RequestHandler, line: str) -> tuple[bool, str]:
    """
    Run one script line against *handler*.

    Returns:
        (ok, output) where ok is False only for the request's own failure
        (e.g. "Not found."); malformed lines raise CommandError instead.
    """
    try:
        tokens = shlex.split(line, comments=True)
    except ValueError as e:
        raise CommandError(str(e)) from None
    if not tokens:
        return True, ""

    name, args = tokens[0].lower(), tokens[1:]
    if name not in COMMAND_USAGE:
        raise CommandError(f"unknown command '{tokens[0]}'")

    if name == "add":
        _expect_args(name, args, 3, 3)
        try:
            component_type = normalize_component_type(args[0])
            group = normalize_group(args[2])
        except CircuitError as e:
            raise CommandError(str(e)) from None
        ok, message = validate_component_value(args[1], component_type)
        if not ok:
            return False, message
        result = handler.handle(
            AddComponentRequest(component_type, parse_value(args[1]), group)
        )
        if result.success:
            return True, f"{result.message} (ID={result.data})"
        return False, result.message

    if name in ("remove", "find"):
        _expect_args(name, args, 1, 1)
        try:
            component_id = parse_component_id(args[0])
        except ValueError as e:
            return False, str(e)
        if name == "remove":
            result = handler.handle(RemoveComponentRequest(component_id))
            return result.success, result.message
        result = handler.handle(FindComponentRequest(component_id))
        if result.success:
            return True, f"{result.message} {result.data.describe()}"
        return False, result.message

    if name == "list":
        _expect_args(name, args, 0, 0)
        series, parallel = handler.handle(ListGroupsRequest()).data
        return True, f"Series: {_format_ids(series)}\nParallel: {_format_ids(parallel)}"

    if name == "undo":
        _expect_args(name, args, 0, 0)
        result = handler.handle(UndoRequest())
        return result.success, result.message

    if name == "analyze":
        _expect_args(name, args, 0, 1)
        frequency = None
        if args:
            try:
                frequency = parse_value(args[0])
            except ValueError:
                return False, INVALID_VALUE_MESSAGE
        result = handler.handle(AnalyzeRequest(frequency))
        return result.success, result.message

    if name == "log":
        _expect_args(name, args, 0, 0)
        entries = handler.controller.get_log()
        if not entries:
            return True, "(log is empty)"
        return True, "\n".join(f"{i}. {entry}" for i, entry in enumerate(entries, 1))

    _expect_args(name, args, 0, 0)
    stats = handler.controller.get_stats()
    return True, (
        f"Total: {stats['total']} | Series: {stats['series']} | "
        f"Parallel: {stats['parallel']} | Next ID: {stats['next_id']}"
    )


def run_script(handler: RequestHandler, lines, out=None, err=None) -> int:
    """Execute every line; return 1 if any line was malformed, else 0."""
    out = out or sys.stdout
    err = err or sys.stderr
    exit_code = 0
    for lineno, line in enumerate(lines, 1):
        try:
            _, output = execute_command(handler, line)
        except CommandError as e:
            print(f"Error: line {lineno}: {e}", file=err)
            exit_code = 1
            continue
        if output:
            print(output, file=out)
    return exit_code


def _settings_from_args(args: argparse.Namespace) -> AnalyzerSettings:
    settings = load_settings(getattr(args, "config", None))
    if getattr(args, "frequency", None) is not None:
        settings = replace(settings, analysis_frequency_hz=args.frequency)
    return settings


def cmd_run(args: argparse.Namespace) -> int:
    """Execute a command script from a file or stdin."""
    handler = RequestHandler(settings=_settings_from_args(args))

    if args.script and args.script != "-":
        path = Path(args.script)
        if not path.exists():
            print(f"Error: file not found: {args.script}", file=sys.stderr)
            return 1
        lines = path.read_text().splitlines()
    else:
        lines = sys.stdin.read().splitlines()

    return run_script(handler, lines)


REPL_BANNER = """\
Circuit Analyzer Interactive Shell
==================================

Available objects:
  handler     - RequestHandler bound to an empty circuit
  controller  - its CircuitController (add_component, remove_component, undo)
  run(line)   - execute one script command, e.g. run("add r 100 series")
  Request classes: AddComponentRequest, RemoveComponentRequest, UndoRequest,
                   FindComponentRequest, ListGroupsRequest, AnalyzeRequest
"""


def build_repl_namespace(settings: AnalyzerSettings | None = None) -> dict:
    """Build the namespace dict for the interactive REPL."""
    handler = RequestHandler(settings=settings)

    def run(line: str) -> None:
        try:
            _, output = execute_command(handler, line)
        except CommandError as e:
            print(f"Error: {e}", file=sys.stderr)
            return
        if output:
            print(output)

    return {
        "handler": handler,
        "controller": handler.controller,
        "run": run,
        "parse_value": parse_value,
        "AddComponentRequest": AddComponentRequest,
        "RemoveComponentRequest": RemoveComponentRequest,
        "UndoRequest": UndoRequest,
        "FindComponentRequest": FindComponentRequest,
        "ListGroupsRequest": ListGroupsRequest,
        "AnalyzeRequest": AnalyzeRequest,
    }


def cmd_repl(args: argparse.Namespace) -> int:
    """Launch an interactive Python REPL with a circuit pre-loaded."""
    namespace = build_repl_namespace(_settings_from_args(args))

    try:
        from IPython import start_ipython

        start_ipython(argv=[], user_ns=namespace, display_banner=False)
        return 0
    except ImportError:
        pass

    import code

    code.interact(banner=REPL_BANNER, local=namespace)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="circuit-analyzer",
        description="Series/parallel circuit analyzer with impedance analysis and undo.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="JSON settings file")
    parser.add_argument(
        "--frequency", "-f", type=float, help="Analysis frequency in Hz (default: 50)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each operation")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Execute a command script")
    run_parser.add_argument("script", nargs="?", help="Script file (default: stdin)")

    subparsers.add_parser("repl", help="Launch interactive Python REPL")

    return parser


def main(argv=None) -> int:
    """CLI entry point. Returns exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "run": cmd_run,
        "repl": cmd_repl,
    }

    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except CircuitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
