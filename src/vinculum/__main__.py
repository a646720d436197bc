"""
Vinculum Main Entry Point

Converts between integers and Roman numerals from the command line, either
locally or through a deployed conversion service, and optionally writes the
results of a batch to a JSON summary.
"""

import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from vinculum.api_client import RomanServiceClient
from vinculum.converters import ConversionMode, get_converter
from vinculum.utils import (
    ConfigurationError,
    ServiceError,
    load_config,
    read_queries,
    write_json_file,
)

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for Vinculum.

    Args:
        argv: Argument list to parse instead of sys.argv

    Returns:
        Parsed command-line arguments
    """
    parser = argparse.ArgumentParser(
        prog="vinculum",
        description="Vinculum - Convert between integers and Roman numerals, up to 3,999,999",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert integers to Roman numerals
  python -m vinculum 4 1994 3999

  # Convert Roman numerals back to integers
  python -m vinculum --reverse XIV MCMXCIV

  # Use vinculum notation for numbers above 3999
  python -m vinculum --limitless 342944

  # Convert a file of values through the remote service and save the results
  python -m vinculum --input values.txt --remote --output results
        """,
    )
    parser.add_argument("values", nargs="*", help="The value(s) to convert.")
    parser.add_argument(
        "--reverse",
        action="store_true",
        help="Convert Roman numerals to integers instead of integers to Roman numerals.",
    )
    parser.add_argument(
        "--limitless",
        action="store_true",
        help="Use vinculum notation to support numbers up to 3,999,999.",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Write vinculum letters as '_X' instead of with a combining overline.",
    )
    parser.add_argument("--input", help="Read values to convert from a file, one per line.")
    parser.add_argument(
        "--output",
        nargs="?",
        const="",
        help="Write a JSON summary to this directory (default: output_dir from config).",
    )
    parser.add_argument(
        "--remote",
        action="store_true",
        help="Send conversions to the conversion service instead of converting locally.",
    )
    parser.add_argument("--config", help="Path to a config.json file.")
    return parser.parse_args(argv)


def select_mode(reverse: bool, limitless: bool) -> ConversionMode:
    """Maps the direction and notation flags to a conversion mode."""
    if limitless:
        return ConversionMode.LIMITLESS_REVERSE if reverse else ConversionMode.LIMITLESS
    return ConversionMode.ROMAN_REVERSE if reverse else ConversionMode.ROMAN


def gather_queries(args: argparse.Namespace) -> List[str]:
    """Collects the values from the command line and the input file, in that order."""
    queries = list(args.values)
    if args.input:
        queries.extend(read_queries(args.input))
    return queries


def write_summary(
    summary: Dict[str, Any], output_dir: str, api_client: Optional[RomanServiceClient]
) -> None:
    """
    Writes a batch summary to `<mode>.json` in the output directory.

    Args:
        summary: The summary returned by BaseConverter.run()
        output_dir: The directory to write to
        api_client: The service client, if the conversions were remote
    """
    final_summary: Dict[str, Any] = {
        "metadata": {
            "mode": summary["mode"],
            "source": api_client.base_url if api_client else "local",
            "createdAt": datetime.now(timezone.utc).isoformat(),
            "counts": {
                "results": len(summary["results"]),
                "errors": len(summary["errors"]),
            },
        },
        "results": summary["results"],
        "errors": summary["errors"],
    }
    file_path = write_json_file(output_dir, summary["mode"], final_summary)
    logger.info(f"Summary written to '{file_path}'")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point to run a conversion.

    This orchestrates the whole run:
    1. Parses command-line arguments
    2. Loads configuration and sets up logging
    3. Converts every value, locally or remotely
    4. Prints the results and optionally writes a summary file

    Returns:
        The process exit code: 0 on success, 1 if anything failed
    """
    try:
        args = parse_arguments(argv)
        config = load_config(args.config)
        logging.basicConfig(
            level=config["log_level"],
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        queries = gather_queries(args)
        if not queries:
            logger.error("No values specified. Pass values as arguments or use --input.")
            return 1

        api_client = None
        if args.remote:
            api_client = RomanServiceClient(config)
            if not api_client.health():
                raise ServiceError(f"Conversion service at {api_client.base_url} is not healthy")

        mode = select_mode(args.reverse, args.limitless)
        converter_kwargs = {"ascii_vinculum": args.ascii} if mode is ConversionMode.LIMITLESS else {}
        converter = get_converter(mode, config, api_client, **converter_kwargs)

        summary = converter.run(queries)
        for record in summary["results"]:
            print(f"{record['input']} -> {record['output']}")
        for record in summary["errors"]:
            print(f"{record['input']} -> error: {record['error']}", file=sys.stderr)

        if args.output is not None:
            write_summary(summary, args.output or config["output_dir"], api_client)

        return 1 if summary["errors"] else 0

    except (ConfigurationError, ServiceError, FileNotFoundError) as e:
        logger.error(f"Fatal error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("\nOperation cancelled by user")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
