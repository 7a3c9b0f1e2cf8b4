"""Command-line interface for epub2txt.

Usage:
    python -m epub2txt book.epub [book.txt]
"""

import argparse
import json
import os
import sys
from pathlib import Path

from .converter import ConverterConfig, convert_epub_to_text
from .errors import EpubConversionError

OUTPUT_FILE_MODE = 0o644


def write_output(output_path: Path, text: str) -> None:
    """Write *text* to *output_path*, replacing any existing file."""
    output_path.write_text(text, encoding="utf-8")
    os.chmod(output_path, OUTPUT_FILE_MODE)


def main() -> int:
    """Main entry point for epub2txt CLI."""
    parser = argparse.ArgumentParser(
        prog="epub2txt",
        description="Extract the text of an EPUB book in reading order",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the book's text to stdout
  epub2txt book.epub

  # Write the text to a file
  epub2txt book.epub book.txt

  # With custom configuration
  epub2txt book.epub book.txt --config config.json

  # Generate default config file
  epub2txt --create-config
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Input EPUB file",
    )

    parser.add_argument(
        "output",
        nargs="?",
        type=Path,
        help="Output text file (if omitted, the text is printed to stdout)",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="JSON configuration file",
    )

    parser.add_argument(
        "--create-config",
        action="store_true",
        help="Create a default configuration file (config.json) and exit",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print progress information to stderr",
    )

    args = parser.parse_args()

    if args.create_config:
        config_path = Path("config.json")
        ConverterConfig().to_json(config_path)
        print(f"Created default configuration: {config_path}")
        return 0

    if not args.input:
        parser.error("input file is required (or use --create-config)")

    config = ConverterConfig()
    if args.config:
        if not args.config.exists():
            print(f"Error: Config file not found: {args.config}", file=sys.stderr)
            return 1
        try:
            config = ConverterConfig.from_json(args.config)
        except json.JSONDecodeError as e:
            print(f"Error: Invalid JSON in config file: {e}", file=sys.stderr)
            return 1
        except (TypeError, ValueError, LookupError) as e:
            print(f"Error: Invalid configuration: {e}", file=sys.stderr)
            return 1

    try:
        text = convert_epub_to_text(
            epub_path=args.input,
            stripper=config.create_stripper(),
            encoding=config.encoding,
            verbose=args.verbose,
        )
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130
    except EpubConversionError as e:
        print(f"Error converting EPUB: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    if args.output is None:
        print(text)
        return 0

    try:
        write_output(args.output, text)
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        return 1

    print(f"Successfully converted {args.input} to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
