"""Parse and validate books API responses."""
from typing import Dict, Any, List

from book_extractor.errors import ParseError
from book_extractor.models import Book, Meta


def parse_meta(raw: Any) -> Meta:
    """
    Parse the nested meta object of a book.

    A missing meta object or a null states list yields no states.
    """
    if raw is None:
        return Meta(states=())
    if not isinstance(raw, dict):
        raise ParseError(f"Expected 'meta' to be an object, got {type(raw).__name__}")

    states = raw.get("states")
    if states is None:
        return Meta(states=())
    if not isinstance(states, list) or not all(isinstance(s, str) for s in states):
        raise ParseError("Expected 'meta.states' to be a list of strings")

    return Meta(states=tuple(states))


def parse_book(item: Dict[str, Any]) -> Book:
    """
    Parse a single book item from the books API.

    Args:
        item: Single item from the "books" array

    Returns:
        Book object

    Raises:
        ParseError: If a required field is missing or has the wrong type
    """
    if not isinstance(item, dict):
        raise ParseError(f"Expected book to be an object, got {type(item).__name__}")

    book_id = item.get("id")
    # bool is an int subclass, reject it explicitly
    if not isinstance(book_id, int) or isinstance(book_id, bool):
        raise ParseError(f"Book has invalid 'id': {book_id!r}")

    display_name = item.get("display_name")
    if not isinstance(display_name, str):
        raise ParseError(f"Book {book_id} has invalid 'display_name': {display_name!r}")

    parent_name = item.get("parent_name")
    if parent_name is not None and not isinstance(parent_name, str):
        raise ParseError(f"Book {book_id} has invalid 'parent_name': {parent_name!r}")

    return Book(
        id=book_id,
        display_name=display_name,
        parent_name=parent_name,
        meta=parse_meta(item.get("meta")),
    )


def parse_books_response(response_json: Any) -> List[Book]:
    """
    Parse full books API response.

    Args:
        response_json: Decoded response body, expected as {"books": [...]}

    Returns:
        List of Book objects in response order

    Raises:
        ParseError: If the body does not have the expected shape
    """
    if not isinstance(response_json, dict):
        raise ParseError("Expected response body to be a JSON object")

    items = response_json.get("books")
    if not isinstance(items, list):
        raise ParseError("Expected response body to contain a 'books' array")

    return [parse_book(item) for item in items]
