from abc import ABC, abstractmethod
from typing import Any, List, Optional

from books.models import Book, book_key


class BooksRepository(ABC):
    """Persistence boundary for books.

    ``create`` and ``update`` are both unconditional upserts: creating an
    existing id overwrites it and updating a missing id creates it.
    """

    @abstractmethod
    def create(self, book: Book) -> None:
        """Store the whole book, replacing any book with the same id."""

    @abstractmethod
    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Return the book with this id, or None if there is none."""

    @abstractmethod
    def update(self, book: Book) -> None:
        """Store the whole book, replacing any book with the same id."""

    @abstractmethod
    def delete(self, book_id: int) -> None:
        """Remove the book with this id. Missing ids are not an error."""

    @abstractmethod
    def list_books(self) -> List[Book]:
        """Return every stored book, in no particular order."""


class DynamoDBBooksRepository(BooksRepository):
    """Books stored in a DynamoDB table keyed by a numeric ``id``.

    The repository talks to DynamoDB through a low-level boto3 client so the
    item format on the wire is exactly what ``Book.to_item`` produces. Each
    method issues a single request; botocore errors are not caught here.
    """

    def __init__(self, client: Any, table_name: str) -> None:
        self._client = client
        self._table_name = table_name

    @property
    def table_name(self) -> str:
        return self._table_name

    def create(self, book: Book) -> None:
        self._put(book)

    def get_by_id(self, book_id: int) -> Optional[Book]:
        response = self._client.get_item(
            TableName=self._table_name,
            Key=book_key(book_id),
        )
        item = response.get("Item")
        if item is None:
            return None
        return Book.from_item(item)

    def update(self, book: Book) -> None:
        self._put(book)

    def delete(self, book_id: int) -> None:
        self._client.delete_item(
            TableName=self._table_name,
            Key=book_key(book_id),
        )

    def list_books(self) -> List[Book]:
        """Return all books in the table.

        NOTE: This is a single full table scan. Results beyond DynamoDB's 1 MB
        page are not fetched; LastEvaluatedKey is ignored.
        """
        response = self._client.scan(TableName=self._table_name)
        return [Book.from_item(item) for item in response.get("Items", [])]

    def _put(self, book: Book) -> None:
        # Encode first so a bad book never reaches the network.
        item = book.to_item()
        self._client.put_item(TableName=self._table_name, Item=item)
