from __future__ import annotations

import math
from typing import Generic, List, Optional, Sequence, TypeVar

from .money import coerce_int

T = TypeVar("T")

DEFAULT_ITEMS_PER_PAGE = 3


def items_per_page_for_width(width: int) -> int:
    width = coerce_int(width)
    if width <= 600:
        return 1
    if width <= 768:
        return 2
    return 3


class Viewport(Generic[T]):
    """
    Seçili gönderiler üzerinde sayfalı pencere.

    next/prev sarar (son sayfadan ilkine); go_to_page sınırlara kırpılır.
    Boş dizide sayfa sayısı 0'dır ve current_page 0'da kalır.
    """

    def __init__(self, items: Optional[Sequence[T]] = None,
                 items_per_page: int = DEFAULT_ITEMS_PER_PAGE):
        if items_per_page < 1:
            raise ValueError("items_per_page must be positive")
        self.items: List[T] = list(items or [])
        self.items_per_page = items_per_page
        self.current_page = 0

    @property
    def page_count(self) -> int:
        return math.ceil(len(self.items) / self.items_per_page)

    @property
    def last_page(self) -> int:
        return max(self.page_count - 1, 0)

    def next_page(self) -> int:
        self.current_page = 0 if self.current_page >= self.last_page else self.current_page + 1
        return self.current_page

    def prev_page(self) -> int:
        self.current_page = self.last_page if self.current_page <= 0 else self.current_page - 1
        return self.current_page

    def go_to_page(self, page: int) -> int:
        self.current_page = min(max(coerce_int(page), 0), self.last_page)
        return self.current_page

    def on_selection_refreshed(self, items: Sequence[T]) -> None:
        self.items = list(items)
        self.current_page = 0

    def on_viewport_resize(self, width: int) -> int:
        self.items_per_page = items_per_page_for_width(width)
        self._clamp()
        return self.items_per_page

    def page_items(self) -> List[T]:
        start = self.current_page * self.items_per_page
        return self.items[start:start + self.items_per_page]

    @property
    def can_go_prev(self) -> bool:
        return self.current_page > 0

    @property
    def can_go_next(self) -> bool:
        return self.current_page < self.last_page

    def dots(self) -> List[dict]:
        return [{"slide": i, "active": i == self.current_page} for i in range(self.page_count)]

    def _clamp(self) -> None:
        self.current_page = min(max(self.current_page, 0), self.last_page)
