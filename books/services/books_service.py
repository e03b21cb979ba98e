from __future__ import annotations

from typing import List, Optional

from books.models import Book
from books.repositories.books_repository import BooksRepository


class BooksService:
    """Use-case entry point for books.

    Every method forwards straight to the repository. Callers depend on this
    class rather than on a concrete repository; errors propagate unchanged.
    """

    def __init__(self, repository: BooksRepository) -> None:
        self._repository = repository

    # Mutation operations
    def create_book(self, book: Book) -> None:
        self._repository.create(book)

    def update(self, book: Book) -> None:
        self._repository.update(book)

    def delete(self, book_id: int) -> None:
        self._repository.delete(book_id)

    # Query operations
    def get_by_id(self, book_id: int) -> Optional[Book]:
        return self._repository.get_by_id(book_id)

    def list_books(self) -> List[Book]:
        return self._repository.list_books()
