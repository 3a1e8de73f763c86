"""
Pytest configuration and shared fixtures.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from book_extractor.models import Book, Meta


def make_response(status_code=200, body=None, text=None, reason="OK"):
    """Build a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    if text is None:
        text = json.dumps(body) if body is not None else ""
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


def make_book(book_id, parent_name, states, display_name=None):
    """Build a Book without going through the parser."""
    return Book(
        id=book_id,
        display_name=display_name or f"Book{book_id}",
        parent_name=parent_name,
        meta=Meta(states=tuple(states))
    )


@pytest.fixture
def mock_session():
    """Create a mock requests session; set get.return_value per test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def two_book_body():
    """API body with one NJ book and one CO book under different parents."""
    return {
        "books": [
            {"id": 1, "display_name": "Book1", "parent_name": "Parent1", "meta": {"states": ["NJ"]}},
            {"id": 2, "display_name": "Book2", "parent_name": "Parent2", "meta": {"states": ["CO"]}},
        ]
    }


@pytest.fixture
def response_factory():
    """Factory for fake HTTP responses."""
    return make_response


@pytest.fixture
def book_factory():
    """Factory for Book objects."""
    return make_book
