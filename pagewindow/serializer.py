from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from boto3.dynamodb.types import TypeDeserializer

from .exceptions import EntrySerializationError


class DynamoSerializer:
    """
    Turns DynamoDB Low-Level items into plain Python values and entry keys.

    Architectural Note:
    -------------------
    Boto3's TypeDeserializer returns every number as 'Decimal'. Keys built
    from those must compare naturally against cursors coming back from
    callers (plain ints and strs), so whole numbers are restored to int and
    the rest to float before a key is assembled.
    """

    def __init__(self) -> None:
        self._deserializer = TypeDeserializer()

    def from_dynamo(self, item: dict[str, Any]) -> dict[str, Any]:
        """Converts DynamoDB JSON format back to standard Python dict."""
        python_data = {k: self._deserializer.deserialize(v) for k, v in item.items()}
        result = self._restore_to_python(python_data)
        assert isinstance(result, dict)
        return result

    def key_from_item(self, item: dict[str, Any], key_attributes: Sequence[str]) -> Any:
        """
        Builds the entry key of a deserialized item.

        A single attribute gives a scalar key; several give a tuple compared
        attribute by attribute, e.g. ("name", "domain").

        Input:  {"name": "alice", "domain": "local", "roles": [...]}, ("name", "domain")
        Output: ("alice", "local")

        Raises:
            EntrySerializationError: If a key attribute is missing from the item
        """
        parts = []
        for attribute in key_attributes:
            if attribute not in item:
                raise EntrySerializationError(
                    f"Item has no key attribute '{attribute}'", attribute=attribute
                )
            parts.append(item[attribute])

        if len(parts) == 1:
            return parts[0]
        return tuple(parts)

    def _restore_to_python(self, value: Any) -> Any:
        """
        Recursively restores DynamoDB values to Python-friendly types.

        Converts:
        - Decimal -> int (if whole number) or float
        """
        if isinstance(value, Decimal):
            if value % 1 == 0:
                return int(value)
            return float(value)
        if isinstance(value, list):
            return [self._restore_to_python(v) for v in value]
        if isinstance(value, dict):
            return {k: self._restore_to_python(v) for k, v in value.items()}
        return value
