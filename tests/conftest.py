"""Pytest configuration and fixtures."""
import os
import sys
from unittest.mock import MagicMock

import pytest

# Ensure the books package is importable without installing the project
_project_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_dir not in sys.path:
    sys.path.insert(0, _project_dir)

# Set before any books imports so boto3 has a region (CI has no AWS config)
os.environ.setdefault("BOOKS_TABLE_NAME", "test-books-table")
if not os.environ.get("AWS_REGION") and not os.environ.get("AWS_DEFAULT_REGION"):
    os.environ["AWS_REGION"] = "us-east-1"


@pytest.fixture
def dynamodb_client():
    """Stand-in for a boto3 DynamoDB client with empty default responses."""
    client = MagicMock()
    client.get_item.return_value = {}
    client.put_item.return_value = {}
    client.delete_item.return_value = {}
    client.scan.return_value = {"Items": [], "Count": 0}
    return client
