"""Tests for the command-line entry point."""
import json

import pytest
from botocore.exceptions import ClientError

from books import main
from books.config import Config
from books.repositories.books_repository import DynamoDBBooksRepository
from books.services.books_service import BooksService


@pytest.fixture
def patched_client(monkeypatch, dynamodb_client):
    monkeypatch.setattr(main, "create_dynamodb_client", lambda config: dynamodb_client)
    return dynamodb_client


class TestBuildBooksService:
    def test_wires_dynamodb_repository(self, dynamodb_client):
        service = main.build_books_service(
            Config(table_name="book", region_name="us-east-1"), client=dynamodb_client
        )
        assert isinstance(service, BooksService)
        service.list_books()
        dynamodb_client.scan.assert_called_once_with(TableName="book")

    def test_repository_type(self, dynamodb_client):
        service = main.build_books_service(
            Config(table_name="book", region_name="us-east-1"), client=dynamodb_client
        )
        assert isinstance(service._repository, DynamoDBBooksRepository)


class TestMain:
    def test_prints_books_and_status(self, monkeypatch, patched_client, capsys):
        monkeypatch.setenv("BOOKS_TABLE_NAME", "book")
        patched_client.scan.return_value = {
            "Items": [{"id": {"N": "1"}, "name": {"S": "Dune"}, "author": {"S": "Herbert"}}]
        }
        assert main.main() == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert json.loads("\n".join(lines[:-1])) == [{"id": 1, "name": "Dune", "author": "Herbert"}]
        assert lines[-1] == "Successfully created DynamoDB client"
        patched_client.scan.assert_called_once_with(TableName="book")

    def test_list_failure_is_printed_not_raised(self, patched_client, capsys):
        patched_client.scan.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "no table"}}, "Scan"
        )
        assert main.main() == 0
        out = capsys.readouterr().out
        assert "Error listing books" in out
        assert out.strip().endswith("Successfully created DynamoDB client")

    def test_undecodable_item_is_printed_not_raised(self, patched_client, capsys):
        patched_client.scan.return_value = {
            "Items": [{"id": {"N": "1.5"}, "name": {"S": "Dune"}, "author": {"S": "Herbert"}}]
        }
        assert main.main() == 0
        assert "Error listing books" in capsys.readouterr().out

    def test_empty_table_name_returns_failure(self, monkeypatch, capsys):
        monkeypatch.setenv("BOOKS_TABLE_NAME", "")
        assert main.main() == 1
        captured = capsys.readouterr()
        assert "unable to load SDK config" in captured.err
        assert "Successfully created DynamoDB client" not in captured.out

    def test_malformed_endpoint_returns_failure(self, monkeypatch, capsys):
        monkeypatch.setenv("DYNAMODB_ENDPOINT_URL", "not a url")
        assert main.main() == 1
        assert "unable to load SDK config, Invalid endpoint" in capsys.readouterr().err
