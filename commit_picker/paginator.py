"""
Pagination over the commit category catalog.

These are plain functions over state owned by the caller: the page index and
the highlight index live in the interaction state, never in here.
"""

import math
from typing import Optional, Sequence, Tuple

from .commit_types import CategoryItem

DEFAULT_PAGE_SIZE = 4


def total_pages(catalog: Sequence[CategoryItem], page_size: int) -> int:
    """
    Number of pages needed to show the catalog.

    Always at least 1, even for an empty catalog.

    Raises:
        ValueError: If page_size is smaller than 1
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    return max(1, math.ceil(len(catalog) / page_size))


def items_for_page(catalog: Sequence[CategoryItem], page_index: int,
                   page_size: int) -> Tuple[CategoryItem, ...]:
    """Return the items shown on the given page (empty when the page starts past the end)."""
    start = page_index * page_size
    if start < 0 or start >= len(catalog):
        return ()
    end = min(len(catalog), start + page_size)
    return tuple(catalog[start:end])


def advance_page(page_index: int, page_count: int) -> int:
    """Move to the next page, wrapping back to the first one after the last."""
    return (page_index + 1) % page_count


def selected_item(page_items: Sequence[CategoryItem],
                  highlight_index: int) -> Optional[CategoryItem]:
    """The highlighted item within the current page, or None if nothing is highlighted."""
    if 0 <= highlight_index < len(page_items):
        return page_items[highlight_index]
    return None
