"""
CLI interface for the filing parser.

Usage:
    python -m filing_parser parse path/to/submission.txt
    python -m filing_parser parse path/to/submission.txt --form-type 8-K --url https://...
    python -m filing_parser parse 320193/0000320193-25-000008.txt --config configs/local.yaml
    python -m filing_parser forms
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def cmd_parse(args):
    """Parse a local submission file, or fetch one from EDGAR."""
    from .config import load_config
    from .forms.factory import parse_filing
    from .parse.errors import FormatError
    from .service import FilingService

    config = load_config(args.config)
    path = Path(args.path)

    try:
        if path.exists():
            text = path.read_text(encoding="utf-8", errors="replace")
            url = args.url or path.resolve().as_uri()
            document = parse_filing(text, url, args.form_type, config=config)
            output = document.to_json(indent=args.indent)
        else:
            result = FilingService(config).parse_sec_filing(args.path, args.form_type)
            output = json.dumps(result, indent=args.indent)
    except FormatError as e:
        logger.error(f"Cannot parse {args.path}: {e}")
        sys.exit(2)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"Saved to: {args.output}")
    else:
        print(output)


def cmd_forms(args):
    """List form types with a dedicated extractor."""
    from .forms.factory import GENERIC_FORM_CODES, FormType

    print(f"\n{'Form':<10} {'Extractor'}")
    print("-" * 40)
    for form_type in FormType:
        print(f"{form_type.value:<10} {form_type.extractor_class.__name__}")
    print(f"\nGeneric: {', '.join(sorted(GENERIC_FORM_CODES))} (and any other code)")


def main():
    parser = argparse.ArgumentParser(
        description="Parse SEC EDGAR submissions into JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse a submission")
    parse_parser.add_argument(
        "path",
        help="Local .txt submission, or an EDGAR path like <cik>/<accession>.txt",
    )
    parse_parser.add_argument(
        "--form-type", "-f",
        help="Form type code (default: CONFORMED SUBMISSION TYPE from the header)",
    )
    parse_parser.add_argument(
        "--url", "-u",
        help="Source URL to record in the output (local files only)",
    )
    parse_parser.add_argument(
        "--config", "-c",
        help="Override config YAML merged onto configs/parser.yaml",
    )
    parse_parser.add_argument(
        "--output", "-o",
        help="Write JSON to this file instead of stdout",
    )
    parse_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indent (default: 2)",
    )
    parse_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging",
    )

    # Forms command
    subparsers.add_parser("forms", help="List supported form types")

    args = parser.parse_args()

    if getattr(args, "verbose", False):
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "parse":
        cmd_parse(args)
    elif args.command == "forms":
        cmd_forms(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
