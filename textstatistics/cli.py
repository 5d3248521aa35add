from argparse import ArgumentParser
import json
import logging
import sys

from textstatistics import __version__, analyze, count_syllables
from textstatistics.data.features import (
    DEFAULT_ID_COLUMN,
    DEFAULT_TEXT_COLUMN,
    build_features_file,
)


def main(argv=None):
    parser = ArgumentParser(
        prog="textstatistics",
        description="Readability and lexical statistics for English text.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # analyze command
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Compute counts and readability scores for a text",
    )
    analyze_parser.add_argument(
        "text",
        nargs="?",
        help="Text to analyze (reads from stdin if not provided)",
    )
    analyze_parser.add_argument(
        "-f",
        "--file",
        type=str,
        help="Path to input text or HTML file",
    )
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )

    # syllables command
    syllables_parser = subparsers.add_parser(
        "syllables",
        help="Estimate syllables for individual words",
    )
    syllables_parser.add_argument("words", nargs="+", help="Words to count")

    # batch command
    batch_parser = subparsers.add_parser(
        "batch",
        help="Score every row of a Parquet or CSV dataset",
    )
    batch_parser.add_argument("input", help="Path to input Parquet or CSV file")
    batch_parser.add_argument("output", help="Path of the Parquet features file to write")
    batch_parser.add_argument(
        "--text-column",
        default=DEFAULT_TEXT_COLUMN,
        help=f"Column holding the text (default: {DEFAULT_TEXT_COLUMN})",
    )
    batch_parser.add_argument(
        "--id-column",
        default=DEFAULT_ID_COLUMN,
        help=f"Column holding the row identifier (default: {DEFAULT_ID_COLUMN})",
    )

    # version command
    subparsers.add_parser(
        "version",
        help="Show version information",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(0)

    if args.command == "analyze":
        handle_analyze(args)
    elif args.command == "syllables":
        handle_syllables(args)
    elif args.command == "batch":
        handle_batch(args)
    elif args.command == "version":
        handle_version()


def handle_version():
    """Display version information."""
    print(f"textstatistics version {__version__}")


def handle_analyze(args):
    """Print the readability report for the input text."""
    if args.file:
        try:
            with open(args.file, "r") as f:
                text = f.read()
        except FileNotFoundError:
            print(f"Error: File not found: {args.file}", file=sys.stderr)
            sys.exit(1)
    elif args.text:
        text = args.text
    else:
        text = sys.stdin.read()

    if not text.strip():
        print("Error: Text cannot be empty", file=sys.stderr)
        sys.exit(1)

    report = analyze(text)

    if args.json:
        print(json.dumps(report.to_json_dict(), indent=2))
    else:
        print(report.summary())


def handle_syllables(args):
    """Print the estimated syllable count of each word."""
    for word in args.words:
        print(f"{word}\t{count_syllables(word)}")


def handle_batch(args):
    """Write the features dataset for a file of texts."""
    try:
        features_df = build_features_file(
            args.input,
            args.output,
            text_column=args.text_column,
            id_column=args.id_column,
        )
    except FileNotFoundError:
        print(f"Error: Dataset file not found: {args.input}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(
            f"Error: Invalid dataset file: {args.input}\n"
            f"Details: {e}",
            file=sys.stderr,
        )
        sys.exit(1)

    print(f"Wrote {len(features_df)} rows to {args.output}")


if __name__ == "__main__":
    main()
