"""
Page request and page result types.

PageRequest is what a request handler hands to the core after validating
its own query parameters; PageResult is what it gets back.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ContractViolationError
from .models import NO_PARAMS, Entry, Links, cursor_value

K = TypeVar("K")
V = TypeVar("V")


class PageRequest(BaseModel):
    """
    Parameters of one page request.

    Attributes:
        page_size: Positive number of items per page. Never coerced or clamped.
        start: Key the page starts from (inclusive). None and NO_PARAMS both
               request the first page.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    page_size: int = Field(strict=True, gt=0)
    start: Any = None

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            error = e.errors()[0]
            field_name = str(error["loc"][0]) if error["loc"] else None
            raise ContractViolationError(
                f"Invalid page request: {error['msg']}",
                field=field_name,
                value=data.get(field_name) if field_name else None,
                original_error=e,
            ) from e

    @field_validator("start")
    @classmethod
    def _no_params_means_no_start(cls, value: Any) -> Any:
        return None if value is NO_PARAMS else value

    @property
    def has_start(self) -> bool:
        """True if the request starts from a real key."""
        return self.start is not None


@dataclass
class PageResult(Generic[K, V]):
    """
    One page of the collection plus navigation cursors.

    Attributes:
        items: Entries of this page in ascending key order
        skipped: Entries left out because their key is below the start key
        total: Entries accepted upstream during the pass, whatever the start
        links: first/prev/next/last cursors that apply to this page
    """

    items: list[Entry[K, V]]
    skipped: int = 0
    total: int = 0
    links: Links = field(default_factory=Links)

    @property
    def count(self) -> int:
        """Number of items on this page."""
        return len(self.items)

    @property
    def has_more(self) -> bool:
        """Returns True if a next page is available."""
        return self.links.next is not None

    @property
    def keys(self) -> list[K]:
        return [entry.key for entry in self.items]

    def to_dict(self, render_item: Callable[[Entry[K, V]], Any] | None = None) -> dict[str, Any]:
        """
        Plain dict shape of the page: total, skipped, links and items.

        Args:
            render_item: Turns an entry into its output form. Defaults to the payload.

        Returns:
            Dict ready for a JSON encoder. NO_PARAMS links are rendered as None.
        """
        render = render_item or (lambda entry: entry.payload)
        return {
            "total": self.total,
            "skipped": self.skipped,
            "links": {name: cursor_value(c) for name, c in self.links.as_dict().items()},
            "items": [render(entry) for entry in self.items],
        }
