from __future__ import annotations

import math
from typing import Sequence, TypeVar

from ..config import DEFAULT_PAGINATION_CONFIG, PaginationConfig
from .models import PagePlan

T = TypeVar("T")


def plan_pages(
    total_items: int,
    max_per_page: int,
    min_last_page: int,
    single_page_ceiling: int,
) -> PagePlan:
    """
    Choose a page size, redistributing a short last page once.

    Up to *single_page_ceiling* items fit on one page. Above that, when the
    naive split leaves fewer than *min_last_page* items on the last page,
    the items are spread over one page fewer. The redistribution is not
    repeated, so large totals (133 at 11/4/14, say) can still end on a
    short page.
    """
    max_per_page = max(1, max_per_page)
    if total_items <= 0:
        return PagePlan(items_per_page=max_per_page, total_pages=0)
    if total_items <= single_page_ceiling:
        return PagePlan(items_per_page=max_per_page, total_pages=1)

    items_per_page = max_per_page
    pages = math.ceil(total_items / items_per_page)
    last_page_items = total_items % items_per_page or items_per_page

    if pages > 1 and 0 < last_page_items < min_last_page:
        items_per_page = math.ceil(total_items / (pages - 1))
        if items_per_page > single_page_ceiling:
            items_per_page = max_per_page
        pages = math.ceil(total_items / items_per_page)

    return PagePlan(items_per_page=max(1, items_per_page), total_pages=max(1, pages))


def paginate(
    total_items: int,
    config: PaginationConfig = DEFAULT_PAGINATION_CONFIG,
) -> PagePlan:
    return plan_pages(
        total_items,
        config.max_per_page,
        config.min_last_page,
        config.single_page_ceiling,
    )


def page_items(items: Sequence[T], page: int, plan: PagePlan) -> list[T]:
    """Return the items on 1-based *page*, clamping the page into range."""
    if plan.total_pages == 0:
        return []
    if plan.total_pages == 1:
        return list(items)
    page = min(max(1, page), plan.total_pages)
    start = (page - 1) * plan.items_per_page
    return list(items[start:start + plan.items_per_page])
