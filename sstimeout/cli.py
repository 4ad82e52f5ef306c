"""sstimeout command-line interface"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from sstimeout import __version__
from sstimeout.common.config import ConfigLoader
from sstimeout.common.log_setup import logging_setup
from sstimeout.common.settings import settings
from sstimeout.common.types import Result
from sstimeout.service import timeout_get, timeoutString_set
from sstimeout.system.context import RuntimeContext

logger = logging.getLogger(__name__)


def parser_build(prog: str, timeout_accepted: bool = True) -> argparse.ArgumentParser:
    """
    Build the argument parser

    Args:
        prog: Program name shown in usage
        timeout_accepted: Whether a positional TIMEOUT is allowed

    Returns:
        Configured parser
    """
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Get or set the screensaver idle timeout "
        "(gnome-screensaver, xscreensaver, KDE, or plain X11)",
    )

    parser.add_argument("--version", action="version", version=f"sstimeout {__version__}")

    if timeout_accepted:
        parser.add_argument(
            "timeout",
            nargs="?",
            default=None,
            help="New timeout, e.g. 10, 10min, 90s, 1h (bare numbers are minutes). "
            "If omitted, print the current timeout.",
        )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config file (default: search standard locations)",
    )

    parser.add_argument(
        "--desktop",
        type=str,
        default=None,
        help="Desktop hint, e.g. gnome or kde-plasma (overrides detection and config)",
    )

    parser.add_argument(
        "--xscreensaver-path",
        type=str,
        default=None,
        metavar="PATH",
        help="xscreensaver settings file (default: ~/.xscreensaver)",
    )

    parser.add_argument(
        "--kscreensaverrc-path",
        type=str,
        default=None,
        metavar="PATH",
        help="KDE screensaver settings file (default: ~/.kde/share/config/kscreensaverrc)",
    )

    parser.add_argument(
        "--assume-running",
        action="append",
        default=[],
        metavar="PROCESS",
        help="Treat PROCESS as running without checking (repeatable)",
    )

    parser.add_argument(
        "--assume-not-running",
        action="append",
        default=[],
        metavar="PROCESS",
        help="Treat PROCESS as not running without checking (repeatable)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full [status, message, value, meta] result as JSON",
    )

    parser.add_argument(
        "--minutes",
        action="store_true",
        help="Print the timeout in minutes instead of seconds",
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging (overrides config)"
    )

    parser.add_argument(
        "--info", action="store_true", help="Enable info logging (overrides config)"
    )

    parser.add_argument(
        "--warning", action="store_true", help="Enable warning logging (overrides config)"
    )

    parser.add_argument(
        "--error", action="store_true", help="Enable error logging (overrides config)"
    )

    parser.add_argument(
        "--critical", action="store_true", help="Enable critical logging (overrides config)"
    )

    return parser


def arguments_parse(
    argv: Optional[Sequence[str]] = None,
    prog: str = "sstimeout",
    timeout_accepted: bool = True,
) -> argparse.Namespace:
    """
    Parse command line arguments

    Args:
        argv: Arguments to parse (default: sys.argv[1:])
        prog: Program name shown in usage
        timeout_accepted: Whether a positional TIMEOUT is allowed

    Returns:
        Parsed CLI arguments.
    """
    args = parser_build(prog, timeout_accepted).parse_args(argv)
    if not timeout_accepted:
        setattr(args, "timeout", None)
    return args


def logLevelOverride_get(args: argparse.Namespace) -> str | None:
    """
    Resolve explicit log level override flags.

    Args:
        args: Parsed CLI args.

    Returns:
        Selected log level or None.
    """
    if args.critical:
        return "CRITICAL"
    if args.error:
        return "ERROR"
    if args.warning:
        return "WARNING"
    if args.info:
        return "INFO"
    if args.debug:
        return "DEBUG"
    return None


def processOverrides_get(args: argparse.Namespace) -> dict[str, bool]:
    """
    Collect --assume-running / --assume-not-running flags.

    Args:
        args: Parsed CLI args.

    Returns:
        Process name mapped to its assumed state; "not running" wins on conflict.
    """
    overrides: dict[str, bool] = {name: True for name in args.assume_running}
    overrides.update({name: False for name in args.assume_not_running})
    return overrides


def resultOutput_format(result: Result, as_json: bool, in_minutes: bool) -> str:
    """
    Render a result for stdout.

    Args:
        result: Operation result
        as_json: Emit the enveloped JSON form
        in_minutes: Show the value in minutes

    Returns:
        Text to print.
    """
    if as_json:
        envelope = result.envelope_build()
        if in_minutes and result.value is not None:
            envelope[2] = result.value / 60
        return json.dumps(envelope)

    if result.value is None:
        return result.message
    if in_minutes:
        return f"{result.value / 60:g}"
    return str(result.value)


def cli_execute(args: argparse.Namespace) -> int:
    """
    Run one get or set from parsed arguments.

    Args:
        args: Parsed CLI args.

    Returns:
        Process exit status: 0 on success, 1 otherwise.
    """
    config_path: Optional[Path] = Path(args.config).expanduser() if args.config else None
    config = ConfigLoader.configWithOverrides_load(
        config_path,
        desktop=args.desktop,
        xscreensaver_path=args.xscreensaver_path,
        kscreensaverrc_path=args.kscreensaverrc_path,
        log_level=logLevelOverride_get(args),
    )
    logging_setup(config.logging.level, config.logging.format, config.logging.file)
    settings.initialize(config)

    context = RuntimeContext.fromSettings_build(process_overrides=processOverrides_get(args))
    logger.debug(f"Desktop hint: {context.desktop_hint!r}")

    if args.timeout is None:
        result = timeout_get(context)
    else:
        result = timeoutString_set(args.timeout, context)

    if result.isSuccess() or args.json:
        print(resultOutput_format(result, args.json, args.minutes))
    if not result.isSuccess():
        print(f"Error: {result.message}", file=sys.stderr)
        return 1
    return 0


def _entrypoint_run(args: argparse.Namespace) -> NoReturn:
    try:
        sys.exit(cli_execute(args))
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def main() -> NoReturn:
    """Main entry point: get without an argument, set with one"""
    _entrypoint_run(arguments_parse())


def get_main() -> NoReturn:
    """Entry point for get-screensaver-timeout"""
    _entrypoint_run(arguments_parse(prog="get-screensaver-timeout", timeout_accepted=False))


def set_main() -> NoReturn:
    """Entry point for set-screensaver-timeout"""
    _entrypoint_run(arguments_parse(prog="set-screensaver-timeout"))


if __name__ == "__main__":
    main()
