"""Command-line interface for transit-router."""

import argparse
import logging
import sys

from transit_router.api import process, validate
from transit_router.document.models import ProcessConfig
from transit_router.version import VERSION


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def cmd_process(args: argparse.Namespace) -> int:
    """Execute process command."""
    setup_logging(args.verbose)

    config = ProcessConfig(
        input_path=args.input,
        output_path=args.output,
        debug_json_dir=args.debug_json,
        validate_input=not args.skip_validation,
    )

    try:
        manifest = process(args.input, args.output, config)
        if args.output:
            print("\nProcessing successful!")
            print(f"Output: {args.output}")
            print(f"Stats: {manifest.stats}")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Processing failed")
        return 1


def cmd_validate(args: argparse.Namespace) -> int:
    """Execute validate command."""
    setup_logging(args.verbose)

    try:
        report = validate(args.input)
        if report.valid:
            print("\nValidation successful!")
            print(f"Stats: {report.stats}")
            if report.warnings:
                print(f"Warnings ({len(report.warnings)}):")
                for warning in report.warnings:
                    print(f"  - {warning}")
            return 0
        else:
            print(f"\nValidation failed with {len(report.errors)} errors:")
            for error in report.errors:
                print(f"  - {error}")
            return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Validation failed")
        return 1


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="transit-router",
        description="Build a bus network from a request document and answer its queries",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Process command
    process_parser = subparsers.add_parser("process", help="Answer stat requests")
    process_parser.add_argument(
        "--input", default="-", help="Path to request document (default: stdin)"
    )
    process_parser.add_argument(
        "--output", default=None, help="Path to response file (default: stdout)"
    )
    process_parser.add_argument(
        "--debug-json",
        default=None,
        metavar="DIR",
        help="Write stops/buses/graph debug JSON files to DIR",
    )
    process_parser.add_argument(
        "--skip-validation",
        action="store_true",
        help="Build without validating the document first",
    )
    process_parser.set_defaults(func=cmd_process)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a request document")
    validate_parser.add_argument("--input", required=True, help="Path to request document")
    validate_parser.set_defaults(func=cmd_validate)

    # Parse and execute
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
