"""Command-line front door for lazyinquire.

Runs one path prompt configured from CLI options and prints the accepted path
on stdout. The prompt itself is drawn on stderr, so the command composes with
shell substitution: ``vim "$(lazyinquire 'Open file')"``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_theme_name, save_theme_name
from .errors import PromptCancelledError, PromptError
from .prompts import Explorer, FileKind
from .ui.render_config import available_theme_names, resolve_render_config
from .validator import ExistsValidator, ExtensionValidator

EXIT_CANCELLED = 130


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _file_kinds(value: str) -> tuple[FileKind, ...]:
    """argparse type for a comma-separated list of file kinds."""
    try:
        return tuple(FileKind.parse(part) for part in value.split(",") if part.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyinquire",
        description="Interactively pick a filesystem path and print it.",
    )
    parser.add_argument("message", nargs="?", default="Select a path:", help="Prompt message.")
    parser.add_argument("--start", type=Path, default=None, help="Starting directory (default: cwd).")
    parser.add_argument(
        "--filter",
        type=_file_kinds,
        default=(),
        metavar="KINDS",
        help="Comma-separated kinds to list: file, dir, symlink, other.",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=[],
        metavar="SUFFIX",
        help="Only accept paths ending with SUFFIX (repeatable).",
    )
    parser.add_argument("--must-exist", action="store_true", help="Reject typed paths that do not exist.")
    parser.add_argument("--dirs", action="store_true", help="Allow selecting directories with Tab.")
    parser.add_argument("--vim", action="store_true", default=None, help="Enable h/j/k/l navigation.")
    parser.add_argument(
        "--hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show dotfiles (default from config, else shown).",
    )
    parser.add_argument("--page-size", type=_positive_int, default=None, help="Rows of entries per page.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--save-theme", action="store_true", help="Persist --theme as the default.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug logs to this file.")
    return parser


def build_explorer(args: argparse.Namespace) -> Explorer:
    """Translate parsed CLI options into an ``Explorer`` builder."""
    theme = args.theme if args.theme is not None else load_theme_name()
    explorer = (
        Explorer(args.message)
        .with_filter(*args.filter)
        .with_render_config(resolve_render_config(theme, no_color=args.no_color))
        .with_directory_selection(args.dirs)
        .with_starting_path(args.start)
    )
    if args.vim is not None:
        explorer = explorer.with_vim_mode(args.vim)
    if args.hidden is not None:
        explorer = explorer.with_show_hidden(args.hidden)
    if args.page_size is not None:
        explorer = explorer.with_page_size(args.page_size)
    if args.must_exist:
        explorer = explorer.with_validator(ExistsValidator())
    if args.ext:
        explorer = explorer.with_validator(ExtensionValidator(*args.ext))
    return explorer


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, run the prompt, and print the selected path."""
    args = build_parser().parse_args(argv)

    if args.log_file is not None:
        logging.basicConfig(
            filename=str(args.log_file),
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    if args.save_theme and args.theme:
        save_theme_name(args.theme)

    try:
        path = build_explorer(args).prompt()
    except PromptCancelledError:
        raise SystemExit(EXIT_CANCELLED) from None
    except PromptError as exc:
        print(f"lazyinquire: {exc}", file=sys.stderr)
        raise SystemExit(1) from None

    sys.stdout.write(f"{path}\n")
