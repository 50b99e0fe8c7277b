# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
Command-line interface.

Usage::

    recolor styles.css                    # print converted CSS to stdout
    recolor -t hex -i a.css b.css         # rewrite files in place
    cat theme.css | recolor --report json # report on stderr
    recolor --lines 10:40 styles.css      # convert only lines 10-40

Exit codes: 0 on success (including files without color declarations),
1 when some color could not be converted, 2 on usage, settings or I/O errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from recolor import __version__
from recolor.convert import convert_region, convert_text
from recolor.errors import SettingsError
from recolor.runtime.report import ReportFormat, summarize_errors, to_report
from recolor.runtime.settings import Settings, clamp_precision, load_settings
from recolor.schema import ConversionOptions, ConversionResult, TargetFormat

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONVERSION_ERRORS = 1
EXIT_USAGE = 2


class RecolorArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Log usage errors and exit with the standard CLI error code 2."""
        self.print_usage(sys.stderr)
        logger.error(message)
        sys.exit(EXIT_USAGE)


def build_parser() -> argparse.ArgumentParser:
    parser = RecolorArgumentParser(
        prog="recolor",
        description="Rewrite CSS color declarations into another color notation.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="files to convert (default: read stdin; '-' also means stdin)",
    )
    parser.add_argument(
        "-t", "--to",
        dest="target_format",
        type=_target_format,
        metavar="FORMAT",
        help="target notation: " + ", ".join(f.value for f in TargetFormat),
    )
    parser.add_argument(
        "-p", "--precision",
        type=int,
        metavar="N",
        help="decimal digits for non-integer components (clamped to 0-6)",
    )
    parser.add_argument(
        "--opacity",
        dest="use_opacity",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="keep '/ 1' on opaque colors whose source spelled out alpha",
    )
    parser.add_argument(
        "-c", "--config",
        metavar="PATH",
        help="YAML settings file (default: ./.recolor.yaml if present)",
    )
    parser.add_argument(
        "--prompt",
        action="store_true",
        help="choose the target format interactively",
    )
    parser.add_argument(
        "--lines",
        type=_line_range,
        metavar="A:B",
        help="convert only lines A to B (1-based, inclusive)",
    )
    parser.add_argument(
        "-i", "--in-place",
        action="store_true",
        help="rewrite files instead of printing to stdout",
    )

    out_group = parser.add_argument_group("reporting")
    out_group.add_argument(
        "--report",
        type=ReportFormat,
        choices=list(ReportFormat),
        metavar="{text,json}",
        help="print a conversion report to stderr",
    )
    out_group.add_argument(
        "--list-errors",
        action="store_true",
        help="print every color that failed to convert, one per line, to stderr",
    )
    verbosity = out_group.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="errors only")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.INFO,
        format="%(levelname)s:%(message)s",
        stream=stderr,
        force=True,
    )

    try:
        settings = load_settings(args.config)
    except SettingsError as exc:
        logger.error("%s", exc)
        return EXIT_USAGE

    files = args.files or ["-"]
    if args.in_place and "-" in files:
        logger.error("--in-place needs FILE arguments")
        return EXIT_USAGE

    target_format = args.target_format
    if target_format is None and (args.prompt or settings.prompt_for_format):
        if "-" in files:
            logger.error("--prompt cannot read the format and the text from stdin")
            return EXIT_USAGE
        target_format = pick_target_format(settings.target_format, stdin, stderr)
        if target_format is None:
            logger.info("No format selected; nothing converted.")
            return EXIT_OK

    options = _options(settings, args, target_format)
    exit_code = EXIT_OK

    for name in files:
        try:
            text = stdin.read() if name == "-" else _read(name)
        except OSError as exc:
            logger.error("Cannot read %s: %s", name, exc)
            return EXIT_USAGE

        result = _convert(text, options, args.lines)
        _log_result(name, result)

        if args.in_place:
            if result.changed:
                try:
                    _write(name, result.output)
                except OSError as exc:
                    logger.error("Cannot write %s: %s", name, exc)
                    return EXIT_USAGE
        else:
            stdout.write(result.output)

        if args.report is not None:
            print(to_report(result, format=args.report), file=stderr)
        if args.list_errors:
            for token in result.error_colors:
                print(token, file=stderr)
        if result.has_errors:
            exit_code = EXIT_CONVERSION_ERRORS

    return exit_code


def pick_target_format(
    current: TargetFormat,
    stdin: TextIO,
    stderr: TextIO,
) -> Optional[TargetFormat]:
    """
    Ask for a target format on ``stderr``, reading the answer from ``stdin``.

    The answer may be a list number or a format name; an empty answer keeps
    ``current``. Returns None if the answer is not a known format.
    """
    formats = list(TargetFormat)
    print("Convert colors to:", file=stderr)
    for i, fmt in enumerate(formats, start=1):
        marker = "*" if fmt is current else " "
        print(f" {marker}{i}. {fmt.label:<12} {fmt.description}", file=stderr)
    stderr.write(f"Format [{current.value}]: ")
    stderr.flush()

    answer = stdin.readline().strip()
    if not answer:
        return current
    if answer.isdigit():
        index = int(answer) - 1
        return formats[index] if 0 <= index < len(formats) else None
    try:
        return TargetFormat.parse(answer)
    except ValueError:
        return None


def line_span(text: str, first: int, last: int) -> tuple[int, int]:
    """Character offsets ``[start, end)`` of lines ``first``-``last`` (1-based)."""
    lines = text.splitlines(keepends=True)
    start = sum(len(line) for line in lines[: first - 1])
    end = start + sum(len(line) for line in lines[first - 1 : last])
    return start, end


def _convert(
    text: str,
    options: ConversionOptions,
    lines: Optional[tuple[int, int]],
) -> ConversionResult:
    if lines is None:
        return convert_text(text, options)
    start, end = line_span(text, *lines)
    if start == end:
        # Range past the end of the text: nothing selected, nothing to do
        return ConversionResult(output=text)
    return convert_region(text, start, end, options)


def _options(
    settings: Settings,
    args: argparse.Namespace,
    target_format: Optional[TargetFormat],
) -> ConversionOptions:
    return ConversionOptions(
        target_format=target_format or settings.target_format,
        precision=clamp_precision(
            settings.precision if args.precision is None else args.precision
        ),
        use_opacity=settings.use_opacity if args.use_opacity is None else args.use_opacity,
    )


def _log_result(name: str, result: ConversionResult) -> None:
    source = "<stdin>" if name == "-" else name
    if result.changed:
        logger.info("%s: converted %d color declaration(s)", source, result.edits_applied)
    elif not result.has_errors:
        logger.info("%s: no color declarations found", source)
    else:
        logger.info("%s: found color declarations, but none could be converted", source)
    if result.has_errors:
        logger.warning("%s: %s", source, summarize_errors(result.error_colors))


def _read(path: str) -> str:
    # newline="" keeps CRLF line endings intact
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _write(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def _target_format(value: str) -> TargetFormat:
    try:
        return TargetFormat.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _line_range(value: str) -> tuple[int, int]:
    first, sep, last = value.partition(":")
    try:
        a = int(first)
        b = int(last) if sep else a
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid line range '{value}'") from None
    if a < 1 or b < a:
        raise argparse.ArgumentTypeError(f"invalid line range '{value}'")
    return a, b
