#!/usr/bin/env python3
"""Book Extractor CLI - fetch, filter and group books into a report."""
import argparse
import asyncio
import sys
import logging

from book_extractor.async_client import AsyncBooksApiClient
from book_extractor.client import BooksApiClient
from book_extractor.config import Config
from book_extractor.errors import ConfigError
from book_extractor.pipeline import PipelineResult, run_pipeline, run_pipeline_async
from book_extractor.report import summarize_groups

logger = logging.getLogger(__name__)


def setup_logging(level: str):
    """Configure console logging on stdout."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )


def extract_sync(api_url: str, args) -> PipelineResult:
    """Run the pipeline with the blocking client."""
    with BooksApiClient(api_url, timeout=args.timeout) as client:
        return run_pipeline(client, args.output)


async def extract_async(api_url: str, args) -> PipelineResult:
    """Run the pipeline with the async client."""
    async with AsyncBooksApiClient(api_url, timeout=args.timeout) as client:
        return await run_pipeline_async(client, args.output)


def build_parser(config: Config) -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Book Extractor - group NJ/CO books by parent into a text report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # URL from BOOKS_API_URL or appsettings.json
  %(prog)s

  # Explicit URL and output file, print a summary table
  %(prog)s --url https://example.com/api/books --output books.txt --summary
        """
    )

    parser.add_argument("--url", help="Books API URL (default: BOOKS_API_URL or ApiSettings.ApiUrl)")
    parser.add_argument("--output", default=config.OUTPUT_FILE, help=f"Report file (default: {config.OUTPUT_FILE})")
    parser.add_argument("--timeout", type=int, default=config.DEFAULT_TIMEOUT, help=f"Request timeout in seconds (default: {config.DEFAULT_TIMEOUT})")
    parser.add_argument("--async", dest="use_async", action="store_true", help="Use async client")
    parser.add_argument("--summary", action="store_true", help="Print a per-group summary table")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help=f"Logging level (default: {config.LOG_LEVEL})")

    return parser


def main(argv=None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    config = Config()
    args = build_parser(config).parse_args(argv)
    setup_logging(args.log_level)

    try:
        api_url = args.url or config.load_api_url()

        if args.use_async:
            result = asyncio.run(extract_async(api_url, args))
        else:
            result = extract_sync(api_url, args)

        if result.succeeded and args.summary and result.grouped:
            print("\n" + summarize_groups(result.grouped))

        return result.exit_code

    except ConfigError as e:
        logger.error(f"❌ Configuration error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("\n⚠️  Interrupted by user")
        return 0
    except Exception as e:
        logger.error(f"❌ Error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
