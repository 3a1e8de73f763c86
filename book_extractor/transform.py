"""Filter and group book records."""
from typing import Dict, Iterable, List

from book_extractor.models import Book

TARGET_STATES = ("NJ", "CO")


def filter_books(books: Iterable[Book], states: Iterable[str] = TARGET_STATES) -> List[Book]:
    """
    Keep books tied to one of the target states that have a parent name.

    State codes match case-sensitively. The result is sorted by parent
    name using plain code-point ordering; sorted() is stable, so books
    sharing a parent keep their input order.

    Args:
        books: Books in API order
        states: State codes to keep

    Returns:
        Filtered books sorted by parent name
    """
    states = tuple(states)
    matching = [
        book for book in books
        if book.has_any_state(states) and book.parent_name
    ]
    return sorted(matching, key=lambda book: book.parent_name)


def group_books(books: Iterable[Book]) -> Dict[str, List[Book]]:
    """
    Group books by parent name.

    Args:
        books: Filtered books

    Returns:
        Mapping of parent name to its books, keys in first-seen order
    """
    groups: Dict[str, List[Book]] = {}

    for book in books:
        groups.setdefault(book.parent_name, []).append(book)

    return groups
