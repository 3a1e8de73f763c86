"""Tests for the async books API client."""
import asyncio

import httpx
import pytest

from book_extractor.async_client import AsyncBooksApiClient
from book_extractor.errors import FetchError, ParseError

API_URL = "https://example.com/api/books"


def fetch_with(handler, url=API_URL):
    """Run fetch_books against a mocked transport."""
    async def run():
        async with AsyncBooksApiClient(url, transport=httpx.MockTransport(handler)) as client:
            return await client.fetch_books()

    return asyncio.run(run())


def test_fetch_books_success(two_book_body):
    """Test that a 200 response is parsed into books."""
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=two_book_body)

    books = fetch_with(handler)

    assert [book.display_name for book in books] == ["Book1", "Book2"]
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert seen[0].headers["Accept"] == "application/json"


def test_fetch_books_invalid_json():
    """Test that a non-JSON body raises ParseError."""
    with pytest.raises(ParseError):
        fetch_with(lambda request: httpx.Response(200, text="Invalid JSON"))


def test_fetch_books_server_error():
    """Test that HTTP 500 raises FetchError with the status code."""
    with pytest.raises(FetchError) as exc_info:
        fetch_with(lambda request: httpx.Response(500))

    assert exc_info.value.status_code == 500
    assert str(exc_info.value) == "Failed to fetch books. Status code: 500 - Internal Server Error"


def test_fetch_books_transport_error():
    """Test that transport failures raise FetchError without a status code."""
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError) as exc_info:
        fetch_with(handler)

    assert exc_info.value.status_code is None


def test_fetch_books_follows_redirects(two_book_body):
    """Test that a redirect is followed to the final JSON response."""
    seen = []

    def handler(request):
        seen.append(request.url.path)
        if request.url.path == "/api/books":
            return httpx.Response(301, headers={"Location": "/new"})
        return httpx.Response(200, json=two_book_body)

    books = fetch_with(handler)

    assert seen == ["/api/books", "/new"]
    assert [book.id for book in books] == [1, 2]


def test_fetch_books_invalid_url():
    """Test that a malformed URL raises FetchError without a status code."""
    with pytest.raises(FetchError) as exc_info:
        fetch_with(lambda request: httpx.Response(200, json={"books": []}), url="http://example.com:abc/")

    assert exc_info.value.status_code is None
