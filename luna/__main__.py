"""CLI: python -m luna [FILE]

With FILE, parse the program and print its top-level expressions. Without,
start an interactive read-print loop.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Optional

from . import __version__
from .errors import ParseError
from .parser import parse
from .types import BooleanSyntax, Dialect

logger = logging.getLogger(__name__)


def history_path() -> Path:
    """Location of the REPL history file.

    $LUNA_HISTORY wins, then $XDG_DATA_HOME/luna, then ~/.local/share/luna.
    """
    override = os.environ.get("LUNA_HISTORY")
    if override:
        return Path(override)
    data_home = os.environ.get("XDG_DATA_HOME")
    base = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return base / "luna" / "history.txt"


def _load_readline():
    try:
        import readline
    except ImportError:
        logger.debug("readline unavailable, history disabled")
        return None
    return readline


def _load_history(readline, path: Path) -> None:
    logger.debug("history file: %s", path)
    if not path.exists():
        print("No previous history.")
        return
    try:
        readline.read_history_file(str(path))
    except OSError as e:
        logger.warning("could not read history from %s: %s", path, e)


def _save_history(readline, path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        readline.write_history_file(str(path))
    except OSError as e:
        logger.warning("could not save history to %s: %s", path, e)


def repl(dialect: Dialect, read: Optional[Callable[[str], str]] = None) -> None:
    """Read lines with `read` (default: input) and print what each parses to."""
    read = read or input
    print(f"Welcome to Luna v{__version__}!")
    print("Press C-d to exit.")

    readline = _load_readline()
    path = history_path()
    if readline is not None:
        _load_history(readline, path)

    while True:
        try:
            line = read("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        try:
            program = parse(line, dialect)
        except ParseError as e:
            print(e.render(line))
            continue
        print(program)

    if readline is not None:
        _save_history(readline, path)


def run_file(path: Path, dialect: Dialect) -> int:
    logger.debug("reading %s", path)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"luna: {e}", file=sys.stderr)
        return 1

    try:
        program = parse(source, dialect)
    except ParseError as e:
        print(e.render(source), file=sys.stderr)
        return 1

    for node in program:
        print(repr(node))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="luna", description="Read Scheme-like source code into S-expressions."
    )
    parser.add_argument("file", nargs="?", metavar="FILE", help="A path to a Scheme program to read")
    parser.add_argument(
        "--booleans",
        choices=[b.value for b in BooleanSyntax],
        default=BooleanSyntax.HASH.value,
        help="Boolean literal syntax: #t/#f (hash) or true/false (bare)",
    )
    parser.add_argument("--no-strings", action="store_true", help="Reject string literals")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )
    dialect = Dialect(booleans=BooleanSyntax(args.booleans), strings=not args.no_strings)

    if args.file is None:
        repl(dialect)
        return 0
    return run_file(Path(args.file), dialect)


if __name__ == "__main__":
    sys.exit(main())
