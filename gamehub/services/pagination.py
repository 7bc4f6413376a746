from __future__ import annotations

import math
from typing import Any, Dict, List, Union

ELLIPSIS = "..."

PageButton = Union[int, str]


def page_offset(page: int, page_size: int) -> int:
    return (max(1, int(page)) - 1) * max(0, int(page_size))


def total_pages(total: int, page_size: int) -> int:
    if total <= 0 or page_size <= 0:
        return 0
    return math.ceil(total / page_size)


def page_window(current: int, pages: int, max_visible: int = 7) -> List[PageButton]:
    """Page buttons for a listing: first, last, and a run around *current*.

    Gaps are marked with ``"..."``. Nothing is shown for a single page.
    """
    if pages <= 1:
        return []
    if pages <= max_visible:
        return list(range(1, pages + 1))

    start = max(2, current - 2)
    end = min(pages - 1, current + 2)
    if current <= 3:
        end = 5
    if current >= pages - 2:
        start = pages - 4

    window: List[PageButton] = [1]
    if start > 2:
        window.append(ELLIPSIS)
    window.extend(range(start, end + 1))
    if end < pages - 1:
        window.append(ELLIPSIS)
    window.append(pages)
    return window


def build_pagination(page: int, page_size: int, total: int, max_visible: int = 7) -> Dict[str, Any]:
    pages = total_pages(total, page_size)
    current = max(1, int(page))
    return {
        "page": current,
        "page_size": page_size,
        "total": total,
        "total_pages": pages,
        "has_prev": current > 1,
        "has_next": current < pages,
        "window": page_window(current, pages, max_visible),
    }


def build_listing(items: List[Any], total: int, page: int, page_size: int, max_visible: int = 7) -> Dict[str, Any]:
    return {
        "total": total,
        "offset": page_offset(page, page_size),
        "limit": page_size,
        "items": items,
        "pagination": build_pagination(page, page_size, total, max_visible),
    }
