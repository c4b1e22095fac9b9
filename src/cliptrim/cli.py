"""
cliptrim — Flatten copied shell snippets so they run when pasted.

Overview
--------
Text copied from a README, a chat window or a terminal rarely pastes cleanly
into a shell: commands are wrapped across lines, prefixed with `$` prompts or
framed by box-drawing gutters. This command reads such text from a file or
standard input and writes a cleaned-up version:

1) **Commands** — multi-line commands are joined into one runnable line,
   prompts and gutters are stripped, wrapped URLs are rejoined and paths with
   spaces are quoted.

2) **Markdown (`--markdown`)** — wrapped paragraphs and list items are reflowed
   into single lines; fenced code blocks are left untouched.

Exit codes
----------
0 the text was transformed, 2 no transformation applied, 1 no input, input
that could not be decoded, or invalid command-line options.

Usage
-----
Run `cliptrim --help` (or `python -m cliptrim.cli --help`) for full options.
Common examples:
    - Flatten the clipboard on macOS:
        pbpaste | cliptrim

    - Be eager, keep paragraph breaks, emit JSON:
        cliptrim --trim snippet.txt --force --preserve-blank-lines --json

    - Reflow a wrapped markdown answer:
        cliptrim --trim answer.md --markdown
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import IO, TYPE_CHECKING, NoReturn

from cliptrim import __version__
from cliptrim.config import Aggressiveness
from cliptrim.exceptions import CliptrimError, InputDecodeError, NoInputError
from cliptrim.logging import logger, setup_logging
from cliptrim.markdown import is_likely_markdown
from cliptrim.output_construction import build_json_payload, build_plain_output, build_summary
from cliptrim.pipeline import transform, transform_markdown
from cliptrim.settings import Settings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cliptrim.config import TrimResult

EXIT_TRANSFORMED = 0
EXIT_NO_INPUT = 1
EXIT_UNCHANGED = 2


def _parse_aggressiveness(value: str) -> Aggressiveness:
    try:
        return Aggressiveness.parse(value)
    except ValueError as e:
        choices = ", ".join(level.value for level in Aggressiveness)
        msg = f"invalid aggressiveness {value!r} (choose from {choices})"
        raise argparse.ArgumentTypeError(msg) from e


def _parse_trim_path(value: str) -> Path | None:
    # `--trim ""` means stdin, not the current directory
    return Path(value) if value else None


def aggressiveness_help() -> str:
    """Describe every aggressiveness level for `--help`."""
    levels = "; ".join(f"{level.value} = {level.title}: {level.blurb}" for level in Aggressiveness)
    return f"How eager command flattening is (default: normal). {levels}"


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with `EXIT_NO_INPUT`.

    argparse exits with 2 by default, which would read as "no transformation".
    """

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_NO_INPUT, f"{self.prog}: error: {message}\n")


def parse_args(argv: Sequence[str] | None = None) -> Settings:
    p = _ArgumentParser(
        prog="cliptrim",
        description="Flatten multi-line shell snippets so they execute.",
    )
    p.add_argument(
        "--trim",
        type=_parse_trim_path,
        nargs="?",
        default=None,
        help="Input file (optional; stdin if omitted).",
    )
    p.add_argument(
        "--force",
        "-f",
        action="store_true",
        help="Force High aggressiveness.",
    )
    p.add_argument(
        "--aggressiveness",
        type=_parse_aggressiveness,
        default=Aggressiveness.NORMAL,
        metavar="{low,normal,high,claudecode}",
        help=aggressiveness_help(),
    )
    p.add_argument(
        "--preserve-blank-lines",
        dest="preserve_blank_lines",
        action="store_true",
        help="Keep blank lines when flattening.",
    )
    p.add_argument(
        "--no-preserve-blank-lines",
        dest="preserve_blank_lines",
        action="store_false",
        help="Remove blank lines (default).",
    )
    p.add_argument(
        "--remove-box-drawing",
        dest="remove_box_drawing",
        action="store_true",
        help="Strip box-drawing characters (default).",
    )
    p.add_argument(
        "--keep-box-drawing",
        dest="remove_box_drawing",
        action="store_false",
        help="Disable box-drawing removal.",
    )
    p.set_defaults(preserve_blank_lines=False, remove_box_drawing=True)

    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit JSON {original, trimmed, transformed}.",
    )
    p.add_argument(
        "--markdown",
        action="store_true",
        help="Reflow wrapped markdown instead of flattening when the input looks like markdown.",
    )
    p.add_argument(
        "--summary",
        action="store_true",
        help="Write a one-line preview of the result to stderr.",
    )
    p.add_argument("--log-file", type=str, default="", help="Log file path.")
    p.add_argument("--verbose", action="store_true", help="Log pass decisions.")
    p.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"cliptrim {__version__}",
    )
    args = p.parse_args(argv)
    return Settings(**vars(args))


def _decode(data: bytes | str, source: str) -> str:
    if isinstance(data, str):
        return data
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputDecodeError(source=source) from e


def read_input(
    path: Path | None = None,
    stream: IO[str] | None = None,
    *,
    is_tty: bool | None = None,
) -> str:
    """Read the text to trim from a file or from standard input.

    An interactive terminal on stdin is treated as "no input" rather than
    waiting for the user to type.

    Args:
        path (Path | None): input file; stdin is used when None
        stream (IO[str] | None): stream to read instead of `sys.stdin`
        is_tty (bool | None): override the stream's own `isatty()`

    Raises:
        NoInputError: the file is unreadable, stdin is a TTY, or the input is empty
        InputDecodeError: the input bytes are not valid UTF-8

    Returns:
        str: the decoded input text
    """
    if path is not None:
        try:
            data: bytes | str = path.read_bytes()
        except OSError as e:
            logger.warning("input_unreadable", path=str(path), error=str(e))
            raise NoInputError from e
        source = str(path)
    else:
        stream = stream if stream is not None else sys.stdin
        if stream is None:
            raise NoInputError
        tty = stream.isatty() if is_tty is None else is_tty
        if tty:
            raise NoInputError
        binary = getattr(stream, "buffer", None)
        data = binary.read() if binary is not None else stream.read()
        source = "stdin"

    if not data:
        raise NoInputError
    return _decode(data, source)


def run(text: str, settings: Settings) -> TrimResult:
    """Apply the markdown reflow or the command pipeline to one input."""
    if settings.markdown and is_likely_markdown(text):
        return transform_markdown(text)
    return transform(
        text,
        settings.trim_config(),
        aggressiveness_override=settings.aggressiveness_override(),
    )


def main(argv: Sequence[str] | None = None) -> int:
    settings = parse_args(argv)
    setup_logging(settings.log_file or None, verbose=settings.verbose, force=True)

    try:
        text = read_input(settings.trim)
    except CliptrimError as e:
        logger.warning("no_input", error=type(e).__name__)
        sys.stderr.write(f"{e.message}\n")
        return EXIT_NO_INPUT

    result = run(text, settings)

    if settings.json_output:
        sys.stdout.write(build_json_payload(result))
    else:
        sys.stdout.write(build_plain_output(result))
    if settings.summary:
        sys.stderr.write(build_summary(result) + "\n")

    return EXIT_TRANSFORMED if result.was_transformed else EXIT_UNCHANGED


def entrypoint() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    entrypoint()
