from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from books.models import Book
from books.repositories.books_repository import BooksRepository


class InMemoryBooksRepository(BooksRepository):
    """Dictionary-backed repository for tests and local runs.

    Books are copied on the way in and on the way out, so callers never share
    an instance with the store.
    """

    def __init__(self, books: Optional[Iterable[Book]] = None) -> None:
        self._books: Dict[int, Book] = {}
        for book in books or []:
            self._books[book.id] = replace(book)

    def create(self, book: Book) -> None:
        self._books[book.id] = replace(book)

    def get_by_id(self, book_id: int) -> Optional[Book]:
        book = self._books.get(book_id)
        if book is None:
            return None
        return replace(book)

    def update(self, book: Book) -> None:
        self._books[book.id] = replace(book)

    def delete(self, book_id: int) -> None:
        self._books.pop(book_id, None)

    def list_books(self) -> List[Book]:
        return [replace(book) for book in self._books.values()]
