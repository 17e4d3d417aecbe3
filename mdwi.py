"""Command-line entry point for building a wiki from Markdown documents."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence

from config_loader import ConfigError, load_settings
from wiki import BuildError, __version__, build_standalone, build_wiki

VERSION_FLAGS = ("-v", "--version")
HELP_FLAGS = ("-h", "--help")
STANDALONE_FLAGS = ("-s", "--standalone")


class CliArgumentError(Exception):
    """Raised instead of exiting when the argument parser rejects argv."""


class _CliParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise CliArgumentError(message)


def build_parser(prog: str) -> argparse.ArgumentParser:
    """Return the parser for the flags mdwi recognizes."""

    parser = _CliParser(prog=prog, add_help=False)
    parser.add_argument("-v", "--version", action="store_true")
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-s", "--standalone", metavar="<file>")
    return parser


def usage_text(prog: str) -> str:
    lines: List[str] = [
        f"Usage: {prog} [options]",
        "Options:",
        "  -v, --version              Print version information and exit",
        "  -h, --help                 Print this message and exit",
        "  -s, --standalone <file>    Create a standalone HTML file",
    ]
    return "\n".join(lines)


def version_text(prog: str) -> str:
    return f"{prog} version {__version__}"


def _flag_name(argument: str) -> str:
    return argument.split("=", 1)[0]


def run_wiki() -> int:
    """Build the wiki for the current directory and return an exit status."""

    try:
        settings = load_settings(Path.cwd())
        build_wiki(Path.cwd(), settings=settings)
    except ConfigError as exc:
        print(f"Error (config): {exc}", file=sys.stderr)
        return 1
    except BuildError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


def run_standalone(input_file: str) -> int:
    """Build a single self-contained HTML page from ``input_file``."""

    try:
        settings = load_settings(Path.cwd())
        build_standalone(
            Path(input_file), executable=settings.pandoc_executable
        )
    except ConfigError as exc:
        print(f"Error (config): {exc}", file=sys.stderr)
        return 1
    except BuildError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


def main(
    argv: Optional[Sequence[str]] = None, prog: Optional[str] = None
) -> int:
    """Dispatch on the leading argument and return the process exit status."""

    arguments = list(sys.argv[1:] if argv is None else argv)
    prog = prog or Path(sys.argv[0]).name

    if not arguments:
        return run_wiki()

    flag = _flag_name(arguments[0])
    if flag in VERSION_FLAGS:
        print(version_text(prog))
        return 0
    if flag in HELP_FLAGS or flag not in STANDALONE_FLAGS:
        # Unknown flags show usage and still exit 0.
        print(usage_text(prog))
        return 0

    try:
        args, _ = build_parser(prog).parse_known_args(arguments)
    except CliArgumentError:
        print(
            "Error: no input file specified for standalone mode.",
            file=sys.stderr,
        )
        return 1
    return run_standalone(args.standalone)


def run() -> None:
    """Console-script wrapper that exits with the status from ``main``."""

    raise SystemExit(main())


if __name__ == "__main__":
    run()
