#!/usr/bin/env python3
import os
import aws_cdk as cdk
from book_table.book_table_stack import BookTableStack


app = cdk.App()

# Stage controls logical environment (dev/stage/prod). Each stage gets its own
# stack; the table name is shared so the CLI finds it with the default config.
stage = os.getenv("STAGE", "dev")

BookTableStack(
    app,
    f"BookTableStack-{stage}",
    table_name=os.getenv("BOOKS_TABLE_NAME", "book"),
    # Account/Region are determined from the CLI or environment variables.
    env=cdk.Environment(
        account=os.getenv("CDK_DEFAULT_ACCOUNT"),
        region=os.getenv("CDK_DEFAULT_REGION"),
    ),
)

app.synth()
