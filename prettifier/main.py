#!/usr/bin/env python3
"""Itinerary prettifier command line entry point."""
import argparse
import csv
import logging
import os
import sys
from typing import List, Optional

from prettifier.assembler import DocumentAssembler, write_output
from prettifier.config import Config
from prettifier.date_formatter import DateTimeFormatter
from prettifier.display import ask_for_color, color_for_choice
from prettifier.lookup_loader import LookupFormatError, load_lookup
from prettifier.models.itinerary import RenderContext
from prettifier.parser import ItineraryParser

logger = logging.getLogger(__name__)

USAGE = "Usage:\n$ prettify ./input.txt ./output.txt ./airport-lookup.csv"


def configure_logging():
    """Configure logging from environment."""
    log_level = Config.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-20s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='prettify',
        description='Expand airport codes and date/time markers in an itinerary',
        add_help=False
    )
    parser.add_argument('files', nargs='*', metavar='FILE',
                        help='input text, output text and airport lookup CSV')
    parser.add_argument('-h', '--help', action='store_true',
                        help='Show usage')
    parser.add_argument('--color', type=str, metavar='N',
                        help='Preselect colour 1-5 instead of asking')
    parser.add_argument('--version', action='store_true',
                        help='Show version')
    return parser


def validate_args(args: argparse.Namespace, argv: List[str]) -> bool:
    """Print usage problems; True when the run may proceed."""
    if not argv:
        print("No command line arguments provided.\nAdd -h to see the usage.")
        return False
    if args.help:
        print(USAGE)
        return False
    if len(args.files) != 3:
        print("Incorrect number of arguments.\nEnter prettify -h to see the usage.")
        return False
    return True


def files_exist(input_path: str, lookup_path: str) -> bool:
    """Report every missing file, not only the first."""
    ok = True
    for path, label in ((input_path, "Input"), (lookup_path, "Airport lookup")):
        if not os.path.exists(path):
            print(f"{label} file not found: {path}")
            ok = False
    return ok


def choose_color(preset: Optional[str]) -> str:
    """Colour from --color, then PRETTIFIER_COLOR, then the prompt."""
    value = preset or Config.PRETTIFIER_COLOR
    if value:
        return color_for_choice(value)
    return ask_for_color()


def run(input_path: str, output_path: str, lookup_path: str,
        color_preset: Optional[str] = None) -> int:
    """
    Convert one itinerary.

    Returns:
        Process exit code
    """
    try:
        mapping = load_lookup(lookup_path)
    except LookupFormatError as e:
        print("Airport lookup malformed:")
        for error in e.errors:
            print(error)
        return 1
    except (OSError, csv.Error, UnicodeDecodeError) as e:
        print(f"Error processing airport lookup file: {e}")
        return 1

    try:
        color = choose_color(color_preset)
    except ValueError as e:
        print(f"Invalid color: {e}")
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nNo color selected.")
        return 1

    context = RenderContext(color)
    assembler = DocumentAssembler(
        ItineraryParser(mapping, context),
        DateTimeFormatter(context)
    )

    try:
        with open(input_path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {input_path} - {e}")
        return 1

    lines = assembler.process_text(text)

    try:
        write_output(lines, output_path)
    except OSError as e:
        print(e)
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else list(argv)
    configure_logging()

    parser = build_arg_parser()
    args, unknown = parser.parse_known_args(argv)

    if args.version:
        print(f"prettify {Config.VERSION}")
        return 0

    if unknown:
        print("Incorrect number of arguments.\nEnter prettify -h to see the usage.")
        return 1

    if not validate_args(args, argv):
        return 0 if args.help else 1

    input_path, output_path, lookup_path = args.files

    if not files_exist(input_path, lookup_path):
        return 1

    try:
        Config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}")
        return 1

    return run(input_path, output_path, lookup_path, args.color)


if __name__ == '__main__':
    sys.exit(main())
