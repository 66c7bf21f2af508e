"""Promosyon gönderisi carousel'ı.

Seçili gönderiler üzerindeki viewport'u ve iki zamanlayıcıyı yönetir:
autoplay (her ``autoplay_delay``'de sonraki sayfa) ve içerik yenileme
(her ``refresh_delay``'de yeni seçim). Herhangi bir askıya alma sebebi
(hover, drag, hidden) aktifken autoplay durur; yenileme zamanlayıcısı
sadece sayfa görünürken çalışır.
"""
from __future__ import annotations

import asyncio
import random
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Set

from .components import Component
from .config import (
    AUTOPLAY_DELAY,
    INITIAL_LOAD_DELAY,
    INSTAGRAM_PROFILE_URL,
    MAX_DISPLAY_POSTS,
    REFRESH_DELAY,
    REFRESH_LOAD_DELAY,
    SWIPE_THRESHOLD,
)
from .content_pool import ContentPool
from .logging_config import get_logger
from .money import format_number
from .scheduling import PeriodicTask
from .selection import SelectedPost, select_fresh_set, utc_now
from .viewport import Viewport

logger = get_logger("InstagramCarousel")

HOVER = "hover"
DRAG = "drag"
HIDDEN = "hidden"

FALLBACK_MESSAGE = "Unable to load Instagram posts at the moment."
FALLBACK_LINK_LABEL = "Visit Our Instagram"


class SwipeGesture:
    """Yatay sürükleme takibi; ``end()`` hangi yöne sayfa geçileceğini döner."""

    def __init__(self, threshold: int = SWIPE_THRESHOLD):
        self.threshold = threshold
        self.active = False
        self.start_x = 0.0
        self.current_x = 0.0

    def start(self, x: float) -> None:
        self.active = True
        self.start_x = x
        self.current_x = x

    def move(self, x: float) -> None:
        if self.active:
            self.current_x = x

    def end(self) -> Optional[str]:
        if not self.active:
            return None
        self.active = False

        diff = self.start_x - self.current_x
        if diff > self.threshold:
            return "next"
        if diff < -self.threshold:
            return "prev"
        return None


class ContentCarousel(Component):
    def __init__(self, pool: ContentPool,
                 viewport: Optional[Viewport[SelectedPost]] = None,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], datetime] = utc_now,
                 max_display_posts: int = MAX_DISPLAY_POSTS,
                 autoplay_delay: float = AUTOPLAY_DELAY,
                 refresh_delay: float = REFRESH_DELAY,
                 initial_load_delay: float = INITIAL_LOAD_DELAY,
                 refresh_load_delay: float = REFRESH_LOAD_DELAY,
                 swipe_threshold: int = SWIPE_THRESHOLD,
                 selector: Callable[..., List[SelectedPost]] = select_fresh_set):
        super().__init__("InstagramCarousel")
        self.pool = pool
        self.viewport: Viewport[SelectedPost] = viewport or Viewport()
        self.rng = rng or random.Random()
        self.clock = clock
        self.max_display_posts = max_display_posts
        self.initial_load_delay = initial_load_delay
        self.refresh_load_delay = refresh_load_delay
        self.selector = selector

        self.swipe = SwipeGesture(swipe_threshold)
        self.autoplay = PeriodicTask("carousel-autoplay", autoplay_delay, self.next_page)
        self.auto_refresh = PeriodicTask("carousel-refresh", refresh_delay, self._on_refresh_tick)

        self.started = False
        self.is_loading = False
        self.refreshing = False
        self.load_failed = False
        self.suspended: Set[str] = set()
        self._load_task: Optional[asyncio.Task] = None

    @property
    def posts(self) -> List[SelectedPost]:
        return self.viewport.items

    # ---------------------------------------------------
    # Lifecycle
    # ---------------------------------------------------
    async def start(self) -> None:
        self.started = True
        self._load_task = asyncio.get_running_loop().create_task(self.load())
        if HIDDEN not in self.suspended:
            self.auto_refresh.start()
            logger.info("auto_refresh_started", every_seconds=self.auto_refresh.interval)

    async def stop(self) -> None:
        self.started = False
        self.autoplay.stop()
        self.auto_refresh.stop()
        if self._load_task is not None and not self._load_task.done():
            self._load_task.cancel()
        self._load_task = None

    async def load(self) -> bool:
        return await self._select(self.initial_load_delay, reason="load")

    async def refresh(self) -> bool:
        self.refreshing = True
        try:
            return await self._select(self.refresh_load_delay, reason="refresh")
        finally:
            self.refreshing = False

    async def _select(self, delay: float, reason: str) -> bool:
        if self.is_loading:
            return False

        self.is_loading = True
        logger.info("loading_posts", reason=reason)
        try:
            # simüle edilmiş ağ gecikmesi
            await asyncio.sleep(delay)
            posts = self.selector(self.pool, self.max_display_posts, rng=self.rng, clock=self.clock)
            self.viewport.on_selection_refreshed(posts)
            self.load_failed = False
            self._sync_autoplay(rearm=True)
            logger.info("posts_loaded", reason=reason, count=len(posts))
            return True
        except Exception:
            self.load_failed = True
            logger.exception("posts_load_failed", reason=reason)
            return False
        finally:
            self.is_loading = False

    async def _on_refresh_tick(self) -> None:
        if HIDDEN in self.suspended or not self.started:
            return
        await self.refresh()

    # ---------------------------------------------------
    # Navigation
    # ---------------------------------------------------
    def next_page(self) -> int:
        return self.viewport.next_page()

    def prev_page(self) -> int:
        return self.viewport.prev_page()

    def go_to_page(self, page: int) -> int:
        return self.viewport.go_to_page(page)

    def resize(self, width: int) -> int:
        return self.viewport.on_viewport_resize(width)

    # ---------------------------------------------------
    # Suspension signals
    # ---------------------------------------------------
    def set_hover(self, inside: bool) -> None:
        self._set_suspended(HOVER, inside)

    def set_visibility(self, visible: bool) -> None:
        was_hidden = HIDDEN in self.suspended
        self._set_suspended(HIDDEN, not visible)
        # aynı sinyalin tekrarı zamanlayıcıyı baştan kurmamalı
        if not self.started or was_hidden == (not visible):
            return
        if visible:
            self.auto_refresh.start()
        else:
            self.auto_refresh.stop()

    def touch_start(self, x: float) -> None:
        self.swipe.start(x)
        self._set_suspended(DRAG, True)

    def touch_move(self, x: float) -> None:
        self.swipe.move(x)

    def touch_end(self) -> Optional[str]:
        if not self.swipe.active:
            return None

        direction = self.swipe.end()
        if direction == "next":
            self.next_page()
        elif direction == "prev":
            self.prev_page()

        self._set_suspended(DRAG, False)
        return direction

    def _set_suspended(self, reason: str, on: bool) -> None:
        if on:
            self.suspended.add(reason)
        else:
            self.suspended.discard(reason)
        self._sync_autoplay()

    def _sync_autoplay(self, rearm: bool = False) -> None:
        if self.started and not self.suspended and self.posts:
            if rearm or not self.autoplay.running:
                self.autoplay.start()
        else:
            self.autoplay.stop()

    # ---------------------------------------------------
    # Presentation
    # ---------------------------------------------------
    def presentation(self) -> Dict[str, Any]:
        if not self.posts and self.load_failed:
            return {
                "fallback": True,
                "message": FALLBACK_MESSAGE,
                "link": INSTAGRAM_PROFILE_URL,
                "linkLabel": FALLBACK_LINK_LABEL,
                "isLoading": self.is_loading,
            }

        viewport = self.viewport
        return {
            "fallback": False,
            "isLoading": self.is_loading,
            "refreshing": self.refreshing,
            "currentPage": viewport.current_page,
            "pageCount": viewport.page_count,
            "itemsPerPage": viewport.items_per_page,
            "canGoPrev": viewport.can_go_prev,
            "canGoNext": viewport.can_go_next,
            "dots": viewport.dots(),
            "autoplay": self.autoplay.running,
            "suspended": sorted(self.suspended),
            "posts": [_post_card(post) for post in viewport.page_items()],
        }


def _post_card(post: SelectedPost) -> Dict[str, Any]:
    display = post.post.display
    return {
        "id": post.id,
        "category": post.category,
        "username": display.author,
        "location": display.location,
        "avatar": display.avatar,
        "image": display.image,
        "caption": display.caption,
        "hashtags": display.tags,
        "likes": post.likes,
        "likesLabel": f"{format_number(post.likes)} likes",
        "date": post.age_label,
    }
