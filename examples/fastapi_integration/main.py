"""
FastAPI Integration Example

A paged user listing. The endpoint validates the query parameters, runs the
single-pass pagination and turns the cursors into links.
"""

from typing import Any
from urllib.parse import urlencode

from fastapi import FastAPI, HTTPException, Query, status
from pydantic import BaseModel

from pagewindow import (
    NO_PARAMS,
    ContractViolationError,
    Cursor,
    Entry,
    Paginator,
    PaginatorOptions,
    entries_from,
    payload_overlaps,
)

MIN_PAGE_SIZE = 2
MAX_PAGE_SIZE = 100


class User(BaseModel):
    """User as stored upstream"""

    name: str
    domain: str = "local"
    roles: list[str] = []


class UserPage(BaseModel):
    """Response model of the paged listing"""

    total: int
    skipped: int
    links: dict[str, str]
    users: list[User]


USERS = [User(name=f"a{n}", roles=["admin"] if n % 3 == 0 else []) for n in range(10, 31)]

app = FastAPI(title="pagewindow + FastAPI Example")
paginator = Paginator(PaginatorOptions(default_page_size=10))


def build_link(path: str, cursor: Cursor, page_size: int, extra: dict[str, Any]) -> str:
    """Encodes a cursor as a listing URL; the first page has no startFrom."""
    params: dict[str, Any] = {**extra, "pageSize": page_size}
    if cursor is not NO_PARAMS:
        params["startFrom"] = cursor
    return f"{path}?{urlencode(params)}"


@app.get("/users", response_model=UserPage)
def list_users(
    pageSize: int = Query(10, ge=MIN_PAGE_SIZE, le=MAX_PAGE_SIZE),  # noqa: N803
    startFrom: str | None = None,  # noqa: N803
    role: str | None = None,
) -> UserPage:
    """List users one page at a time"""
    filters = [payload_overlaps("roles", [role])] if role else []
    try:
        page = paginator.page(
            entries_from(USERS, key="name"), start=startFrom, page_size=pageSize, filters=filters
        )
    except ContractViolationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e

    extra = {"role": role} if role else {}
    links = {
        name: build_link("/users", cursor, pageSize, extra)
        for name, cursor in page.links.as_dict().items()
    }

    def to_user(entry: Entry[str, User]) -> User:
        assert entry.payload is not None
        return entry.payload

    return UserPage(
        total=page.total,
        skipped=page.skipped,
        links=links,
        users=[to_user(entry) for entry in page.items],
    )


# Run with: uvicorn main:app --reload
# Visit: http://localhost:8000/users?pageSize=3&startFrom=a14
