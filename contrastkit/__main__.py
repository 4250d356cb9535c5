# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""contrastkit -- WCAG contrast checks from the command line.

Usage: python -m contrastkit <command> [options]

Commands:
  check TEXT BACKGROUND   Contrast ratio and WCAG verdicts for a pair
  validate VALUE          Classify a color string (with hex auto-correction)
  convert VALUE           Print a color in another format
"""

from __future__ import annotations

import argparse
import logging
import sys

from contrastkit import __version__
from contrastkit.color import format_color, parse_color, validate_color
from contrastkit.contrast import CONTRAST_LEVELS, suggest_for_pair
from contrastkit.runtime import (
    CheckError,
    SerializerFormat,
    check_contrast,
    to_text_report,
    to_tool_output,
)
from contrastkit.schema import ColorFormat

# Exit codes
EXIT_OK = 0
EXIT_FAIL = 1
EXIT_USAGE = 2

# --fail-below choices
GATE_LEVELS = {
    'AAA': CONTRAST_LEVELS['AAA'],
    'AA': CONTRAST_LEVELS['AA'],
    'AA-large': CONTRAST_LEVELS['AA_LARGE'],
}


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  contrastkit check "#333333" "#FFFFFF" --json\n'
        '  contrastkit check "rgb(119, 119, 119)" "#FFFFFF" --suggest\n'
        '  contrastkit check "#777777" "#FFFFFF" --fail-below AA\n'
        '  contrastkit validate fff\n'
        '  contrastkit convert "hsl(210, 50%, 40%)" --to rgb\n'
    )
    parser = argparse.ArgumentParser(
        prog='contrastkit',
        description='Color parsing and WCAG contrast checks.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        '-v',
        '--verbose',
        action='store_true',
        help='Log engine decisions (debug level) to stderr',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('check', help='Contrast ratio and WCAG verdicts for a pair')
    p.add_argument('text', help='Text color (hex, rgb, rgba, hsl, hsla)')
    p.add_argument('background', help='Background color')
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    p.add_argument('-s', '--suggest', action='store_true', help='Include improvement suggestions')
    p.add_argument(
        '-f',
        '--fail-below',
        choices=tuple(GATE_LEVELS),
        default=None,
        help='Exit 1 if the pair does not meet this level (CI gating)',
    )

    p = sub.add_parser('validate', help='Classify a color string')
    p.add_argument('value', help='Color string to validate')

    p = sub.add_parser('convert', help='Print a color in another format')
    p.add_argument('value', help='Color string to convert')
    p.add_argument(
        '-t',
        '--to',
        choices=[f.value for f in ColorFormat],
        default=ColorFormat.HEX.value,
        help='Target format (default: hex)',
    )

    return parser


def _run_check(args: argparse.Namespace) -> int:
    try:
        check = check_contrast(args.text, args.background)
    except CheckError as e:
        print(f'Error: {e.message}', file=sys.stderr)
        return EXIT_USAGE

    suggestions = None
    if args.suggest:
        suggestions = suggest_for_pair(check.text_color, check.background_color)

    if args.json:
        print(to_tool_output(check, format=SerializerFormat.JSON_PRETTY, suggestions=suggestions))
    else:
        print(to_text_report(check, suggestions=suggestions))

    # CI gate -- after output so the report is visible even on failure
    if args.fail_below is not None and not check.meets(GATE_LEVELS[args.fail_below]):
        print(f'\nFAIL: contrast {check.ratio:.2f}:1 does not meet {args.fail_below}', file=sys.stderr)
        return EXIT_FAIL
    return EXIT_OK


def _run_validate(args: argparse.Namespace) -> int:
    result = validate_color(args.value)
    if not result.is_valid:
        print(f'invalid: {result.error}')
        return EXIT_FAIL

    line = f'valid {result.format.value}: {result.normalized}'
    if result.note:
        line += f' ({result.note})'
    print(line)
    return EXIT_OK


def _run_convert(args: argparse.Namespace) -> int:
    parsed = parse_color(args.value)
    if parsed is None:
        print(f'Error: cannot convert {args.value!r}', file=sys.stderr)
        return EXIT_FAIL
    print(format_color(parsed, args.to))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(message)s',
    )

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    if args.command == 'check':
        return _run_check(args)
    if args.command == 'validate':
        return _run_validate(args)
    return _run_convert(args)


if __name__ == '__main__':
    sys.exit(main())
