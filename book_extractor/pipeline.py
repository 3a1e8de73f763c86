"""
Fetch → filter → group → save pipeline.

The pipeline never raises pipeline errors to its caller. A failing stage
stops the run and is reported through the returned PipelineResult.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Union

from book_extractor.errors import BookExtractorError
from book_extractor.models import Book
from book_extractor.report import DEFAULT_REPORT_FILE, save_report
from book_extractor.transform import filter_books, group_books

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    """Pipeline stages."""
    START = "start"
    FETCHING = "fetching"
    FILTERING = "filtering"
    GROUPING = "grouping"
    SAVING = "saving"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PipelineResult:
    """Outcome of one pipeline run."""
    state: PipelineState = PipelineState.START
    fetched: int = 0
    filtered: int = 0
    groups: int = 0
    grouped: Dict[str, List[Book]] = field(default_factory=dict)
    output_path: Optional[Path] = None
    failed_stage: Optional[PipelineState] = None
    error: Optional[BookExtractorError] = None

    @property
    def succeeded(self) -> bool:
        return self.state == PipelineState.DONE

    @property
    def exit_code(self) -> int:
        """Process exit status for this result."""
        return 0 if self.succeeded else 1


def _fail(result: PipelineResult, error: BookExtractorError) -> PipelineResult:
    result.failed_stage = result.state
    result.state = PipelineState.FAILED
    result.error = error
    logger.error(f"An error occurred: {error}")
    return result


def _process(books: List[Book], output_path: Union[str, Path], result: PipelineResult) -> PipelineResult:
    """Run the filter, group and save stages on fetched books."""
    grouped: Dict[str, List[Book]] = {}

    # Nothing to filter or group when the API returned no books
    if books:
        result.state = PipelineState.FILTERING
        logger.info("Filtering books...")
        filtered = filter_books(books)
        result.filtered = len(filtered)
        logger.info(f"Filtered {len(filtered)} books.")

        if filtered:
            result.state = PipelineState.GROUPING
            logger.info("Grouping books...")
            grouped = group_books(filtered)
            result.groups = len(grouped)
            logger.info(f"{len(grouped)} groups made.")

    result.grouped = grouped

    result.state = PipelineState.SAVING
    logger.info("Saving results to a file...")
    result.output_path = save_report(grouped, output_path)
    logger.info(f"Result has been saved to '{result.output_path}'")

    result.state = PipelineState.DONE
    return result


def run_pipeline(client, output_path: Union[str, Path] = DEFAULT_REPORT_FILE) -> PipelineResult:
    """
    Run the pipeline with a blocking client.

    Args:
        client: Object with a fetch_books() method (see BooksApiClient)
        output_path: Report file

    Returns:
        PipelineResult, in DONE or FAILED state
    """
    result = PipelineResult()
    try:
        result.state = PipelineState.FETCHING
        logger.info("Fetching books from the API...")
        books = client.fetch_books()
        result.fetched = len(books)
        logger.info(f"Fetched {len(books)} books successfully.")

        return _process(books, output_path, result)
    except BookExtractorError as e:
        return _fail(result, e)


async def run_pipeline_async(client, output_path: Union[str, Path] = DEFAULT_REPORT_FILE) -> PipelineResult:
    """
    Run the pipeline with an async client.

    Only the fetch is awaited; the remaining stages are synchronous.
    """
    result = PipelineResult()
    try:
        result.state = PipelineState.FETCHING
        logger.info("Fetching books from the API...")
        books = await client.fetch_books()
        result.fetched = len(books)
        logger.info(f"Fetched {len(books)} books successfully.")

        return _process(books, output_path, result)
    except BookExtractorError as e:
        return _fail(result, e)
