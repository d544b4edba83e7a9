from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageMetadata:
    page: int
    per_page: int
    total_items: int
    total_pages: int

    def to_dict(self) -> dict:
        return {
            "page": self.page,
            "perPage": self.per_page,
            "totalItems": self.total_items,
            "totalPages": self.total_pages,
        }


@dataclass(frozen=True)
class Page(Generic[T]):
    items: tuple[T, ...]
    paging: Optional[PageMetadata] = None


def parse_page(body: dict, parse_item: Callable[[dict], T]) -> Page[T]:
    """Parse a ``{data: [...], paging: {...}}`` list response.

    The backend omits ``paging`` when the request was not paginated.
    """
    items = tuple(parse_item(raw) for raw in (body.get("data") or []))
    raw_paging = body.get("paging")
    if not raw_paging:
        return Page(items=items)

    return Page(
        items=items,
        paging=PageMetadata(
            page=int(raw_paging.get("page", 0)),
            per_page=int(raw_paging.get("perPage", 0)),
            total_items=int(raw_paging.get("totalItems", 0)),
            total_pages=int(raw_paging.get("totalPages", 0)),
        ),
    )
