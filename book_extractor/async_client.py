"""Async HTTP client for the books API."""
import httpx
from typing import List, Optional
import logging

from book_extractor.errors import FetchError, ParseError
from book_extractor.models import Book
from book_extractor.parse import parse_books_response

logger = logging.getLogger(__name__)


class AsyncBooksApiClient:
    """Async client for the books API."""

    HEADERS = {"Accept": "application/json"}

    def __init__(
        self,
        api_url: str,
        timeout: int = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize async client.

        Args:
            api_url: Endpoint returning {"books": [...]}
            timeout: Request timeout
            transport: Optional transport (used to mock the API in tests)
        """
        self.api_url = api_url
        self.timeout = timeout

        # Create async HTTP client
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport, follow_redirects=True)

    async def fetch_books(self) -> List[Book]:
        """
        Fetch and parse the book list asynchronously.

        Raises:
            FetchError: On transport failure or non-success status
            ParseError: If the body is not the expected JSON shape
        """
        logger.info(f"Async request: GET {self.api_url}")

        try:
            response = await self.client.get(self.api_url, headers=self.HEADERS)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Async request failed: {e}")
            raise FetchError(f"Failed to fetch books: {e}") from e

        if not response.is_success:
            logger.error(f"Server answered {response.status_code} {response.reason_phrase}")
            raise FetchError(
                f"Failed to fetch books. Status code: {response.status_code} - {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ParseError(f"Failed to deserialize JSON response: {e}") from e

        return parse_books_response(body)

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
