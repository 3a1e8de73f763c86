"""HTTP client for the books API."""
import requests
from typing import Optional, List
import logging

from book_extractor.errors import FetchError, ParseError
from book_extractor.models import Book
from book_extractor.parse import parse_books_response

logger = logging.getLogger(__name__)


class BooksApiClient:
    """Client for the books API. Sends a single GET, never retries."""

    HEADERS = {"Accept": "application/json"}

    def __init__(
        self,
        api_url: str,
        timeout: int = 10,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize books API client.

        Args:
            api_url: Endpoint returning {"books": [...]}
            timeout: Request timeout in seconds
            session: Optional session to reuse (a new one is created otherwise)
        """
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_books(self) -> List[Book]:
        """
        Fetch and parse the book list.

        Returns:
            List of Book objects in API response order

        Raises:
            FetchError: On transport failure or non-success status
            ParseError: If the body is not the expected JSON shape
        """
        logger.info(f"Request: GET {self.api_url}")

        try:
            response = self.session.get(
                self.api_url,
                headers=self.HEADERS,
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {e}")
            raise FetchError(f"Failed to fetch books: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.error(f"Server answered {response.status_code} {response.reason}")
            raise FetchError(
                f"Failed to fetch books. Status code: {response.status_code} - {response.reason}",
                status_code=response.status_code,
                reason=response.reason
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ParseError(f"Failed to deserialize JSON response: {e}") from e

        return parse_books_response(body)

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
