"""Command-line interface for word-break processing."""

import argparse
import importlib.metadata
import sys
from pathlib import Path

from wordbreak.core.util import safe_json
from wordbreak.options.loader import load_options, OptionsLoadError
from wordbreak.options.schema import WordBreakOptions
from wordbreak.runtime.rewriter import ResponseRewriter
from wordbreak.segmenters.wordbreak import WordBreakSegmenter
from wordbreak.examples.utils import SimpleConsoleLogger


def build_options(args) -> WordBreakOptions:
    """Combine an optional options file with command-line overrides."""
    options = load_options(args.options) if args.options else WordBreakOptions()

    overrides = {}
    if args.min_chars is not None:
        overrides["minimum_characters"] = args.min_chars
    if args.marker is not None:
        overrides["word_break_characters"] = args.marker
    if getattr(args, "require_dot", False):
        overrides["require_dot_for_case_breaks"] = True
    if getattr(args, "all_text", False):
        overrides["process_html_only"] = False

    return options.with_overrides(**overrides) if overrides else options


def process_command(args):
    """Insert word breaks into plain text."""
    try:
        options = build_options(args)
        text = args.text if args.text is not None else sys.stdin.read()
        print(WordBreakSegmenter(options).process(text))
        return 0

    except OptionsLoadError as e:
        print(f"❌ Options error: {e}")
        return 1
    except ValueError as e:
        print(f"❌ Invalid option: {e}")
        return 1


def rewrite_command(args):
    """Rewrite an HTML or text file the way the middleware would."""
    try:
        path = Path(args.file)
        if not path.exists():
            print(f"Error: File not found: {path}")
            return 1

        options = build_options(args)
        logger = SimpleConsoleLogger() if args.verbose else None
        rewriter = ResponseRewriter(options=options, logger=logger)

        body = path.read_text(encoding="utf-8")
        if not rewriter.should_process(200, args.content_type):
            print(f"⚠️  Content type {args.content_type} is not processed with these options")
            print(body)
            return 0

        result = rewriter.rewrite(body, args.content_type)
        if args.json:
            print(safe_json(result))
        else:
            print(result.text)
        return 0

    except OptionsLoadError as e:
        print(f"❌ Options error: {e}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"❌ Cannot read {args.file}: {e}")
        return 1
    except ValueError as e:
        print(f"❌ Invalid option: {e}")
        return 1


def validate_options_command(args):
    """Validate a word-break options file."""
    try:
        options_path = Path(args.options_file)
        if not options_path.exists():
            print(f"Error: Options file not found: {options_path}")
            return 1

        print(f"Validating options: {options_path}")
        options = load_options(options_path)

        print("✅ Options validation successful!")
        print(f"   Minimum characters: {options.minimum_characters}")
        print(f"   Break marker: {options.word_break_characters!r}")
        print(f"   HTML only: {options.process_html_only}")

        if args.verbose:
            print(f"   CSS selector: {options.css_selector}")
            print(f"   Require dot for case breaks: {options.require_dot_for_case_breaks}")

        return 0

    except OptionsLoadError as e:
        print(f"❌ Options validation failed: {e}")
        return 1


def info_command(args):
    """Display version and dependency information."""
    print("wordbreak CLI")
    print("=" * 50)

    try:
        version = importlib.metadata.version("wordbreak")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nDependencies:")
    for dist in ("beautifulsoup4", "soupsieve", "pydantic", "PyYAML", "starlette"):
        try:
            print(f"   ✅ {dist}: {importlib.metadata.version(dist)}")
        except importlib.metadata.PackageNotFoundError:
            print(f"   ❌ {dist}: not installed")

    return 0


def _add_option_arguments(parser):
    parser.add_argument(
        "--options",
        help="Path to an options YAML file"
    )
    parser.add_argument(
        "-m", "--min-chars",
        type=int,
        help="Minimum characters before breaks are inserted"
    )
    parser.add_argument(
        "--marker",
        help="Break marker to insert (default: <wbr>)"
    )


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wordbreak",
        description="Insert word-break opportunities into long identifiers"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Process command
    process_parser = subparsers.add_parser(
        "process",
        help="Insert word breaks into plain text"
    )
    process_parser.add_argument(
        "text",
        nargs="?",
        help="Text to process (default: read from stdin)"
    )
    _add_option_arguments(process_parser)
    process_parser.add_argument(
        "--require-dot",
        action="store_true",
        help="Leave words without dots untouched"
    )

    # Rewrite command
    rewrite_parser = subparsers.add_parser(
        "rewrite",
        help="Rewrite an HTML or text file like the middleware"
    )
    rewrite_parser.add_argument(
        "file",
        help="Path to the file to rewrite"
    )
    rewrite_parser.add_argument(
        "--content-type",
        default="text/html",
        help="Content type to treat the file as (default: text/html)"
    )
    _add_option_arguments(rewrite_parser)
    rewrite_parser.add_argument(
        "--all-text",
        action="store_true",
        help="Also rewrite non-HTML text content"
    )
    rewrite_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the rewrite result as JSON"
    )
    rewrite_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log rewrite details"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate an options file"
    )
    validate_parser.add_argument(
        "options_file",
        help="Path to the options YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show all option values"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and dependency information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "process":
        return process_command(args)
    elif args.command == "rewrite":
        return rewrite_command(args)
    elif args.command == "validate":
        return validate_options_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
