"""Book repository backed by an Amazon DynamoDB table."""
