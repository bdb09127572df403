"""Command-line front door for lazylaunch.

Collects candidates (stdin lines or ``PATH`` executables), runs the
interactive prompt on the controlling terminal, and prints the choice.
"""

from __future__ import annotations

import argparse
import contextlib
import logging
import os
import sys
from collections.abc import Iterator

from .config import load_config
from .errors import LauncherError
from .frontend import Frontend
from .runtime import run_launcher
from .search import collect_path_executables, read_candidates
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

EXIT_CHOSEN = 0
EXIT_NO_CANDIDATES = 1
EXIT_FAILURE = 2
EXIT_CANCELLED = 130

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazylaunch",
        description="Pick a candidate from a filterable list in the terminal.",
    )
    parser.add_argument("--prompt", default=None, help="Text shown before the query.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--path-executables",
        action="store_true",
        help="Offer executables on PATH even when stdin is piped.",
    )
    parser.add_argument(
        "--print-query",
        action="store_true",
        help="Print the final query line before the chosen candidate.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging threshold (default: WARNING).",
    )
    parser.add_argument("--log-file", default=None, help="Write log records to this file instead of stderr.")
    return parser


def configure_logging(level: str, log_file: str | None) -> None:
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("lazylaunch")
    root.handlers[:] = [handler]
    root.setLevel(level)


@contextlib.contextmanager
def terminal_fds() -> Iterator[tuple[int, int]]:
    """Yield ``(input_fd, output_fd)`` for the interactive UI.

    When stdin or stdout is redirected, the controlling terminal is opened so
    piped candidates and printed results do not collide with the UI.
    """
    if sys.stdin.isatty() and sys.stdout.isatty():
        yield sys.stdin.fileno(), sys.stdout.fileno()
        return
    try:
        fd = os.open("/dev/tty", os.O_RDWR | os.O_NOCTTY)
    except OSError as exc:
        raise LauncherError(f"no controlling terminal available: {exc}") from exc
    try:
        yield fd, fd
    finally:
        os.close(fd)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the launcher, and return the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    config = load_config()
    prompt = args.prompt if args.prompt is not None else config.prompt
    theme = resolve_theme(args.theme or config.theme, config.highlight_symbol)

    if sys.stdin.isatty() or args.path_executables:
        candidates = collect_path_executables()
    else:
        candidates = read_candidates(sys.stdin)
    logger.info("loaded %d candidates", len(candidates))
    if not candidates:
        print("lazylaunch: no candidates", file=sys.stderr)
        return EXIT_NO_CANDIDATES

    try:
        with terminal_fds() as (input_fd, output_fd):
            frontend = Frontend.init(prompt, stdin_fd=input_fd, stdout_fd=output_fd, theme=theme)
            choice = run_launcher(frontend, candidates)
            query = frontend.get_query()
    except LauncherError as exc:
        logger.debug("launcher failed", exc_info=True)
        print(f"lazylaunch: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if args.print_query:
        print(query)
    if choice is None:
        return EXIT_CANCELLED
    print(choice.display_string())
    return EXIT_CHOSEN


def run() -> None:
    """Console-script entrypoint."""
    raise SystemExit(main())


if __name__ == "__main__":
    run()
