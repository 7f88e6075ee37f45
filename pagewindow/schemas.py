"""
Pydantic response envelope for a computed page.

Mirrors the shape listing endpoints reply with:
{"total": ..., "skipped": ..., "links": {...}, "items": [...]}.
Cursor values are left raw; turning them into URLs is up to the endpoint.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from .models import Entry, Links, cursor_value
from .pagination import PageResult

T = TypeVar("T")


class LinksModel(BaseModel):
    """
    Navigation links of a page.

    Absent links are excluded when dumping with exclude_unset=True; a `first`
    link is present with value None, meaning "no start parameter".
    """

    first: Any = None
    prev: Any = None
    next: Any = None
    last: Any = None

    @classmethod
    def from_links(cls, links: Links) -> "LinksModel":
        present = {name: cursor_value(cursor) for name, cursor in links.as_dict().items()}
        return cls(**present)


class PageEnvelope(BaseModel, Generic[T]):
    """Serializable page: totals, links and the rendered items."""

    total: int = Field(ge=0)
    skipped: int = Field(ge=0)
    links: LinksModel = Field(default_factory=LinksModel)
    items: list[T] = Field(default_factory=list)

    @classmethod
    def from_result(
        cls,
        result: PageResult[Any, Any],
        render_item: Callable[[Entry[Any, Any]], Any] | None = None,
    ) -> "PageEnvelope[Any]":
        """
        Builds the envelope of a PageResult.

        Args:
            result: Page computed by paginate() or a Paginator
            render_item: Turns an entry into its output form. Defaults to the payload.
        """
        render = render_item or (lambda entry: entry.payload)
        return cls(
            total=result.total,
            skipped=result.skipped,
            links=LinksModel.from_links(result.links),
            items=[render(entry) for entry in result.items],
        )

    def to_json_dict(self) -> dict[str, Any]:
        """Dumps the envelope, leaving out links that do not apply to this page."""
        data = self.model_dump(mode="json", exclude={"links"})
        data["links"] = self.links.model_dump(mode="json", exclude_unset=True)
        return data
