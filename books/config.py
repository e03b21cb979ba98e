import os
from dataclasses import dataclass
from typing import Any, Optional

import boto3

DEFAULT_TABLE_NAME = "book"
DEFAULT_REGION = "ap-southeast-1"


@dataclass(frozen=True)
class Config:
    """Settings needed to reach the books table.

    Credentials are not part of this: boto3 resolves them from its usual
    chain (environment, shared config files, instance role).
    """

    table_name: str
    region_name: str
    endpoint_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        table_name = os.getenv("BOOKS_TABLE_NAME", DEFAULT_TABLE_NAME).strip()
        if not table_name:
            raise RuntimeError("BOOKS_TABLE_NAME environment variable must not be empty")

        region_name = (
            os.getenv("AWS_REGION")
            or os.getenv("AWS_DEFAULT_REGION")
            or DEFAULT_REGION
        )

        # Point at DynamoDB Local or another compatible endpoint when set.
        endpoint_url = os.getenv("DYNAMODB_ENDPOINT_URL") or None

        return cls(
            table_name=table_name,
            region_name=region_name,
            endpoint_url=endpoint_url,
        )


def create_dynamodb_client(config: Config) -> Any:
    """Build a low-level DynamoDB client for the configured region/endpoint."""
    session = boto3.session.Session(region_name=config.region_name)
    return session.client("dynamodb", endpoint_url=config.endpoint_url)
