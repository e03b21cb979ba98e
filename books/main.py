"""
Command-line entry point: list the books stored in DynamoDB.

Loads the store configuration from the environment, wires the DynamoDB
repository into the books service, performs one list call and prints the
result followed by a status line.
"""
import json
import sys
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from books.config import Config, create_dynamodb_client
from books.models import BookMarshalError
from books.repositories.books_repository import DynamoDBBooksRepository
from books.services.books_service import BooksService


def build_books_service(config: Config, client: Optional[Any] = None) -> BooksService:
    """Wire a BooksService on top of a DynamoDB-backed repository."""
    if client is None:
        client = create_dynamodb_client(config)
    repository = DynamoDBBooksRepository(client, config.table_name)
    return BooksService(repository)


def main() -> int:
    try:
        config = Config.from_env()
        service = build_books_service(config)
    # botocore raises ValueError for a malformed endpoint URL.
    except (RuntimeError, ValueError, BotoCoreError) as e:
        print(f"unable to load SDK config, {e}", file=sys.stderr)
        return 1

    try:
        books = service.list_books()
        print(json.dumps([book.to_dict() for book in books], indent=2))
    except (BotoCoreError, ClientError, BookMarshalError) as e:
        print(f"Error listing books: {e}")

    print("Successfully created DynamoDB client")
    return 0


if __name__ == "__main__":
    sys.exit(main())
