"""Command-line entry point for rsh"""

import argparse
import io
import sys
from typing import List, Optional, TextIO

from . import __version__
from .config import ShellConfig, load_config
from .exceptions import ConfigValidationError
from .logger import setup_logging
from .shell import Shell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rsh",
        description="Restricted shell: runs only allowlisted commands.",
    )
    parser.add_argument("--config", default=None, help="Path to a JSON configuration file")
    parser.add_argument("--prompt", default=None, help="Prompt text (default: rsh>)")
    parser.add_argument(
        "--allow", action="append", default=None, metavar="NAME",
        help="Permit this command name (repeatable; replaces the default allowlist)",
    )
    parser.add_argument("--max-args", type=int, default=None, help="Maximum tokens per line (default: 20)")
    parser.add_argument(
        "--strict-args", action="store_true", default=None,
        help="Reject over-long lines instead of truncating them",
    )
    parser.add_argument("--log-level", default=None, help="Diagnostic log level (default: WARNING)")
    parser.add_argument("--log-file", default=None, help="Write diagnostics to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_config(args: argparse.Namespace) -> ShellConfig:
    """Combine the config file (if any) with command-line overrides"""
    config = load_config(args.config) if args.config else ShellConfig()
    return config.with_overrides(
        prompt=args.prompt,
        allowed_commands=tuple(args.allow) if args.allow else None,
        max_args=args.max_args,
        strict_args=args.strict_args,
        log_level=args.log_level,
        log_file=args.log_file,
    )


def open_input() -> TextIO:
    """
    Wrap stdin so that undecodable bytes survive as surrogates.

    The launcher encodes arguments with os.fsencode(), so a byte read here
    reaches the child unchanged.
    """
    buffer = getattr(sys.stdin, 'buffer', None)
    if buffer is None:
        return sys.stdin
    return io.TextIOWrapper(buffer, encoding=sys.getfilesystemencoding(), errors="surrogateescape")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except ConfigValidationError as e:
        sys.stderr.write(f"rsh: {e}\n")
        return e.exit_code

    try:
        setup_logging(config.log_level, config.log_file)
    except OSError as e:
        sys.stderr.write(f"rsh: cannot open log file {config.log_file}: {e.strerror or e}\n")
        return 2

    stdin = open_input()
    try:
        return Shell(config, stdin=stdin).run()
    finally:
        if stdin is not sys.stdin:
            # Leave the underlying buffer open for sys.stdin
            stdin.detach()


if __name__ == "__main__":
    sys.exit(main())
