"""
Entry sources: adapters presenting upstream data as a plain Entry stream.

All sources are lazy. A window pulls entries one at a time, so a DynamoDB
scan is paged through by boto3 while the page is being computed and the
table is never loaded into memory as a whole.
"""

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from ._logging import logger
from .exceptions import handle_source_errors
from .models import Entry
from .serializer import DynamoSerializer

KeySpec = str | Sequence[str] | Callable[[Any], Any]


def _key_getter(key: KeySpec) -> Callable[[Any], Any]:
    if callable(key):
        return key

    names = (key,) if isinstance(key, str) else tuple(key)
    if not names:
        raise ValueError("At least one key field is required")

    def _field(record: Any, name: str) -> Any:
        if isinstance(record, dict):
            return record[name]
        return getattr(record, name)

    if len(names) == 1:
        return lambda record: _field(record, names[0])
    return lambda record: tuple(_field(record, name) for name in names)


def entries_from(records: Iterable[Any], key: KeySpec) -> Iterator[Entry[Any, Any]]:
    """
    Wraps arbitrary records as entries, keeping each record as the payload.

    Args:
        records: Dicts, pydantic models or any objects
        key: Field name, sequence of field names (composite tuple key)
             or a function computing the key from a record

    Usage:
        entries = entries_from(users, key=("name", "domain"))
        page = paginate(entries, page_size=20)
    """
    get_key = _key_getter(key)
    return (Entry(get_key(record), record) for record in records)


class DynamoEntrySource(Iterable[Entry[Any, dict[str, Any]]]):
    """
    Streams the items of a DynamoDB table (or index) as entries.

    Each iteration runs a fresh scan through the boto3 paginator; payloads
    are the items converted to plain Python dicts.

    Usage:
        source = DynamoEntrySource(client, "users", key_attributes=("name", "domain"))
        page = paginate(source, page_size=20, start=("bob", "local"))
    """

    def __init__(
        self,
        client: Any,
        table_name: str,
        key_attributes: str | Sequence[str],
        index_name: str | None = None,
        serializer: DynamoSerializer | None = None,
    ) -> None:
        self.client = client
        self.table_name = table_name
        self.key_attributes = (
            (key_attributes,) if isinstance(key_attributes, str) else tuple(key_attributes)
        )
        if not self.key_attributes:
            raise ValueError("DynamoEntrySource needs at least one key attribute")
        self.index_name = index_name
        self.serializer = serializer or DynamoSerializer()

    def __iter__(self) -> Iterator[Entry[Any, dict[str, Any]]]:
        """
        Lazy Execution: the scan is sent to DynamoDB only when iteration starts.
        Uses a Paginator to automatically handle 'LastEvaluatedKey'.
        """
        kwargs: dict[str, Any] = {"TableName": self.table_name}
        if self.index_name:
            kwargs["IndexName"] = self.index_name

        logger.info(
            "Starting source scan",
            extra={
                "table": self.table_name,
                "index": self.index_name,
                "key_attributes": list(self.key_attributes),
            },
        )

        with handle_source_errors(table_name=self.table_name):
            paginator = self.client.get_paginator("scan")
            count = 0
            for page in paginator.paginate(**kwargs):
                for item in page["Items"]:
                    data = self.serializer.from_dynamo(item)
                    yield Entry(self.serializer.key_from_item(data, self.key_attributes), data)
                    count += 1

        logger.info("Source scan finished", extra={"table": self.table_name, "count": count})
