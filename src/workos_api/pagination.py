"""Cursor pagination shared by every WorkOS list endpoint.

List endpoints answer with ``{"data": [...], "list_metadata": {"before": ..., "after": ...}}``.
The cursors are opaque ids of the items bordering the page; a ``null`` cursor
means there is nothing further in that direction. To move forward, re-issue
the same request with ``after`` set to the previous ``list_metadata.after``;
to move backward, use ``before``.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Awaitable, Callable, Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P", bound="PaginationParams")

PaginationOrder = Literal["asc", "desc"]
Direction = Literal["forward", "backward"]


class ListMetadata(BaseModel):
    """Cursors bordering a page."""

    before: Optional[str] = None
    after: Optional[str] = None


class PaginatedList(BaseModel, Generic[T]):
    """A single page of a cursor-paginated collection."""

    data: list[T]
    list_metadata: ListMetadata = Field(default_factory=ListMetadata)


class PaginationParams(BaseModel):
    """Pagination query parameters.

    List operations subclass this and add their own filters; every field
    that is not ``None`` is sent as a query parameter.
    """

    limit: Optional[int] = Field(default=None, ge=1, le=100)
    before: Optional[str] = None
    after: Optional[str] = None
    order: PaginationOrder = "desc"

    def to_query(self) -> dict[str, Any]:
        query: dict[str, Any] = {}
        for key, value in self.model_dump(mode="json", by_alias=True, exclude_none=True).items():
            if isinstance(value, list):
                if not value:
                    continue
                value = ",".join(str(item) for item in value)
            elif isinstance(value, bool):
                value = "true" if value else "false"
            query[key] = value
        return query

    def next_page(self: P, metadata: ListMetadata) -> P | None:
        """Params for the page after ``metadata``'s page, or ``None`` at the end."""
        if metadata.after is None:
            return None
        return self.model_copy(update={"after": metadata.after, "before": None})

    def previous_page(self: P, metadata: ListMetadata) -> P | None:
        """Params for the page before ``metadata``'s page, or ``None`` at the start."""
        if metadata.before is None:
            return None
        return self.model_copy(update={"before": metadata.before, "after": None})


async def iterate_pages(
    fetch: Callable[[P], Awaitable[PaginatedList[T]]],
    params: P,
    *,
    direction: Direction = "forward",
) -> AsyncIterator[PaginatedList[T]]:
    """Yield pages by following cursors until one is absent.

    ``fetch`` is a bound list operation such as ``client.fga.list_warrants``.
    Each request waits for the previous page, since it needs that page's
    cursor. Errors from ``fetch`` propagate unchanged and nothing is retried.
    """
    current: P | None = params
    start = params.after if direction == "forward" else params.before
    seen: set[str] = {start} if start is not None else set()
    while current is not None:
        page = await fetch(current)
        yield page
        if direction == "forward":
            current = current.next_page(page.list_metadata)
            cursor = current.after if current is not None else None
        else:
            current = current.previous_page(page.list_metadata)
            cursor = current.before if current is not None else None
        if cursor is not None:
            if cursor in seen:
                logger.warning("workos_pagination_cursor_repeated cursor=%s", cursor)
                return
            seen.add(cursor)


async def iterate_items(
    fetch: Callable[[P], Awaitable[PaginatedList[T]]],
    params: P,
    *,
    direction: Direction = "forward",
) -> AsyncIterator[T]:
    """Yield every item across pages, in server order within each page."""
    async for page in iterate_pages(fetch, params, direction=direction):
        for item in page.data:
            yield item
