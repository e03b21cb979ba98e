from aws_cdk import (
    Stack,
    CfnOutput,
    RemovalPolicy,
    aws_dynamodb as dynamodb,
)
from constructs import Construct


class BookTableStack(Stack):

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        table_name: str = "book",
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Single-attribute numeric key; the repository addresses items by id only.
        books_table = dynamodb.Table(
            self,
            "BooksTable",
            table_name=table_name,
            partition_key=dynamodb.Attribute(
                name="id", type=dynamodb.AttributeType.NUMBER
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY,  # For testing
        )

        self.books_table = books_table

        CfnOutput(
            self,
            "BooksTableName",
            value=books_table.table_name,
            description="DynamoDB table name for books",
        )
