"""
Command-line entry point.

    ytmerge [OPTIONS] <URL> [OUTPUT_PATH]

``main`` is the only place that turns errors into exit codes.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from . import __version__
from .core.config_manager import Settings
from .core.environment_checker import EnvironmentChecker
from .core.errors import InvalidInput, YtMergeError
from .core.pipeline import run
from .core.process_manager import process_manager
from .models.options import Options
from .utils.logger import configure_logging, logger

PROG = "ytmerge"
LONG_FLAGS = frozenset({"--help", "--force", "--quiet"})
SHORT_FLAGS = frozenset("hfq")


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise InvalidInput(message, show_usage=True)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        usage="%(prog)s [OPTIONS] <URL> [OUTPUT_PATH]",
        description=(
            "Download the best audio and video streams of a YouTube video "
            "and merge them into one file."
        ),
        epilog=f"{PROG} {__version__}",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="show this help and exit")
    parser.add_argument(
        "-f", "--force", action="store_true", help="overwrite the output file if it exists"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="print nothing; rely on the exit code"
    )
    parser.add_argument("url", nargs="?", default="", metavar="URL", help="YouTube video URL")
    parser.add_argument(
        "output",
        nargs="?",
        default="",
        metavar="OUTPUT_PATH",
        help="output file or existing directory (default: ./<title>.mp4)",
    )
    return parser


def quiet_requested(argv: Sequence[str]) -> bool:
    """True if -q/--quiet appears anywhere, including in a short-flag cluster like ``-fq``."""

    for token in argv:
        if token == "--quiet":
            return True
        if token.startswith("-") and not token.startswith("--") and "q" in token[1:]:
            return True
    return False


def reject_unknown_flags(argv: Sequence[str]) -> None:
    """Fail on any dash token that is not a known flag.

    argparse would otherwise take `-`, `--` and negative numbers such as `-1`.
    """

    for token in argv:
        if not token.startswith("-"):
            continue
        if token in LONG_FLAGS:
            continue
        if len(token) > 1 and token[1] != "-" and set(token[1:]) <= SHORT_FLAGS:
            continue
        raise InvalidInput(f"Unknown option: {token}", show_usage=True)


def parse_args(argv: Sequence[str], parser: argparse.ArgumentParser | None = None) -> Options | None:
    """Build ``Options`` from raw tokens; ``None`` means help was requested."""

    parser = parser or build_parser()
    reject_unknown_flags(argv)
    ns = parser.parse_args(list(argv))
    if ns.help:
        return None
    if not ns.url:
        raise InvalidInput("Missing URL", show_usage=True)
    return Options(url=ns.url, output_path=ns.output, force=ns.force, quiet=ns.quiet)


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    settings = Settings()
    quiet = quiet_requested(argv)
    configure_logging(quiet=quiet, log_file=settings.log_file)

    parser = build_parser()
    try:
        with process_manager.signal_guard():
            toolchain = EnvironmentChecker(settings).require()

            options = parse_args(argv, parser)
            if options is None:
                if not quiet:
                    parser.print_help(sys.stderr)
                return 1

            run(options, toolchain, settings)
    except YtMergeError as e:
        if isinstance(e, InvalidInput) and e.show_usage and not quiet:
            parser.print_usage(sys.stderr)
        logger.error(e.message)
        if e.detail:
            logger.debug(e.detail)
        return e.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())
