from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict


class BookMarshalError(ValueError):
    """Raised when a Book cannot be converted to or from a DynamoDB item."""


def book_key(book_id: int) -> Dict[str, Dict[str, str]]:
    """Primary key for point operations (GetItem / DeleteItem)."""
    return {"id": {"N": _encode_id(book_id)}}


def _encode_id(value: Any) -> str:
    # bool is an int subclass but never a valid id.
    if isinstance(value, bool) or not isinstance(value, int):
        raise BookMarshalError(f"Book id must be an int, got {type(value).__name__}")
    return str(value)


def _encode_string(field: str, value: Any) -> Dict[str, str]:
    if not isinstance(value, str):
        raise BookMarshalError(f"Book {field} must be a str, got {type(value).__name__}")
    return {"S": value}


def _attribute(item: Dict[str, Any], field: str, type_descriptor: str) -> Any:
    attribute = item.get(field)
    if not isinstance(attribute, dict) or type_descriptor not in attribute:
        raise BookMarshalError(
            f"Item attribute {field!r} is missing or is not of type {type_descriptor}"
        )
    return attribute[type_descriptor]


def _decode_id(raw: str) -> int:
    try:
        number = Decimal(raw)
    except (InvalidOperation, TypeError) as e:
        raise BookMarshalError(f"Item attribute 'id' is not a number: {raw!r}") from e
    # DynamoDB numbers carry up to 38 digits, more than the default context.
    if not number.is_finite() or number != number.to_integral_value():
        raise BookMarshalError(f"Item attribute 'id' is not an integer: {raw!r}")
    return int(number)


@dataclass
class Book:
    id: int
    name: str
    author: str

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "Book":
        """Build a Book from a low-level DynamoDB item.

        The item is expected in the attribute value format returned by the
        boto3 client, e.g. ``{"id": {"N": "1"}, "name": {"S": "Dune"}}``.
        """
        if not isinstance(item, dict):
            raise BookMarshalError(f"Item must be a mapping, got {type(item).__name__}")
        return cls(
            id=_decode_id(_attribute(item, "id", "N")),
            name=_attribute(item, "name", "S"),
            author=_attribute(item, "author", "S"),
        )

    def to_item(self) -> Dict[str, Dict[str, str]]:
        """Encode to the low-level DynamoDB item format used by PutItem."""
        return {
            "id": {"N": _encode_id(self.id)},
            "name": _encode_string("name", self.name),
            "author": _encode_string("author", self.author),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "author": self.author,
        }
