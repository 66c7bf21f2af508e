import asyncio
from unittest.mock import MagicMock

import pytest

from storefront.carousel import ContentCarousel, SwipeGesture
from storefront.config import INSTAGRAM_PROFILE_URL
from storefront.selection import select_fresh_set


@pytest.fixture
def carousel(reference_pool, rng, clock):
    return ContentCarousel(
        reference_pool,
        rng=rng,
        clock=clock,
        max_display_posts=6,
        autoplay_delay=60,
        refresh_delay=60,
        initial_load_delay=0,
        refresh_load_delay=0,
    )


async def _started(carousel):
    await carousel.start()
    await carousel._load_task
    return carousel


def test_swipe_gesture_thresholds():
    gesture = SwipeGesture(threshold=50)

    gesture.start(300)
    gesture.move(200)
    assert gesture.end() == "next"

    gesture.start(100)
    gesture.move(160)
    assert gesture.end() == "prev"

    gesture.start(100)
    gesture.move(130)
    assert gesture.end() is None


def test_tap_without_movement_is_not_a_swipe():
    gesture = SwipeGesture(threshold=50)
    gesture.start(300)
    gesture.move(100)
    gesture.end()

    gesture.start(120)
    assert gesture.end() is None
    assert gesture.end() is None


@pytest.mark.asyncio
async def test_load_populates_first_page(carousel):
    assert await carousel.load() is True

    view = carousel.presentation()
    assert view["fallback"] is False
    assert view["pageCount"] == 2
    assert view["currentPage"] == 0
    assert [p["id"] for p in view["posts"]] == ["1", "5", "8"]
    assert view["posts"][0]["likesLabel"].endswith(" likes")
    assert view["posts"][0]["date"] in ("1 DAY AGO", "2 DAYS AGO")


@pytest.mark.asyncio
async def test_failed_first_load_shows_fallback(reference_pool):
    carousel = ContentCarousel(reference_pool, initial_load_delay=0,
                               selector=MagicMock(side_effect=RuntimeError("api down")))

    assert await carousel.load() is False

    view = carousel.presentation()
    assert view["fallback"] is True
    assert view["link"] == INSTAGRAM_PROFILE_URL


@pytest.mark.asyncio
async def test_failed_refresh_keeps_previous_posts(carousel):
    await carousel.load()
    before = [p.id for p in carousel.posts]
    carousel.next_page()

    carousel.selector = MagicMock(side_effect=RuntimeError("api down"))
    assert await carousel.refresh() is False

    assert [p.id for p in carousel.posts] == before
    assert carousel.viewport.current_page == 1
    assert carousel.presentation()["fallback"] is False
    assert carousel.refreshing is False


@pytest.mark.asyncio
async def test_refresh_resets_page(carousel):
    await carousel.load()
    carousel.next_page()
    assert await carousel.refresh() is True
    assert carousel.viewport.current_page == 0


@pytest.mark.asyncio
async def test_concurrent_load_is_skipped(carousel):
    carousel.is_loading = True
    assert await carousel.load() is False
    assert carousel.posts == []


@pytest.mark.asyncio
async def test_selector_receives_injected_rng_and_clock(reference_pool, rng, clock):
    selector = MagicMock(wraps=select_fresh_set)
    carousel = ContentCarousel(reference_pool, rng=rng, clock=clock, initial_load_delay=0,
                               max_display_posts=4, selector=selector)

    await carousel.load()

    selector.assert_called_once_with(reference_pool, 4, rng=rng, clock=clock)
    assert len(carousel.posts) == 4


@pytest.mark.asyncio
async def test_start_arms_timers_and_stop_cancels(carousel):
    await _started(carousel)

    assert carousel.autoplay.running
    assert carousel.auto_refresh.running

    await carousel.stop()
    assert not carousel.autoplay.running
    assert not carousel.auto_refresh.running


@pytest.mark.asyncio
async def test_hover_and_drag_suspend_autoplay(carousel):
    await _started(carousel)

    carousel.set_hover(True)
    assert not carousel.autoplay.running
    carousel.set_hover(False)
    assert carousel.autoplay.running

    carousel.touch_start(300)
    assert not carousel.autoplay.running
    assert carousel.presentation()["suspended"] == ["drag"]
    carousel.touch_move(150)
    assert carousel.touch_end() == "next"
    assert carousel.viewport.current_page == 1
    assert carousel.autoplay.running

    await carousel.stop()


@pytest.mark.asyncio
async def test_drag_end_keeps_hover_suspension(carousel):
    await _started(carousel)

    carousel.set_hover(True)
    carousel.touch_start(100)
    carousel.touch_move(200)
    assert carousel.touch_end() == "prev"
    assert carousel.viewport.current_page == 1
    assert not carousel.autoplay.running

    await carousel.stop()


@pytest.mark.asyncio
async def test_hidden_tab_pauses_both_timers(carousel):
    await _started(carousel)

    carousel.set_visibility(False)
    assert not carousel.autoplay.running
    assert not carousel.auto_refresh.running

    carousel.set_visibility(True)
    assert carousel.autoplay.running
    assert carousel.auto_refresh.running

    await carousel.stop()


@pytest.mark.asyncio
async def test_autoplay_advances_pages(reference_pool, rng, clock):
    carousel = ContentCarousel(reference_pool, rng=rng, clock=clock, autoplay_delay=0.01,
                               refresh_delay=60, initial_load_delay=0)
    await _started(carousel)
    ticks = []
    carousel.autoplay.callback = lambda: ticks.append(carousel.next_page())

    await asyncio.sleep(0.06)
    await carousel.stop()

    assert ticks
    assert set(ticks) <= {0, 1}


@pytest.mark.asyncio
async def test_refresh_tick_is_skipped_while_hidden(carousel):
    await _started(carousel)
    carousel.set_visibility(False)
    carousel.selector = MagicMock()

    await carousel._on_refresh_tick()

    carousel.selector.assert_not_called()
    await carousel.stop()


@pytest.mark.asyncio
async def test_resize_changes_items_per_page(carousel):
    await carousel.load()
    carousel.resize(500)
    view = carousel.presentation()
    assert view["itemsPerPage"] == 1
    assert view["pageCount"] == 6
    assert len(view["posts"]) == 1


@pytest.mark.asyncio
async def test_timers_stay_off_until_started(carousel):
    await carousel.load()
    carousel.set_visibility(True)
    carousel.set_hover(False)
    assert not carousel.autoplay.running
    assert not carousel.auto_refresh.running


@pytest.mark.asyncio
async def test_repeated_visible_signal_keeps_refresh_timer(carousel):
    await _started(carousel)
    refresh_task = carousel.auto_refresh._task
    autoplay_task = carousel.autoplay._task

    carousel.set_visibility(True)
    carousel.set_visibility(True)
    carousel.set_hover(False)

    assert carousel.auto_refresh._task is refresh_task
    assert carousel.autoplay._task is autoplay_task
    await carousel.stop()


@pytest.mark.asyncio
async def test_returning_to_foreground_rearms_refresh_timer(carousel):
    await _started(carousel)
    refresh_task = carousel.auto_refresh._task

    carousel.set_visibility(False)
    carousel.set_visibility(False)
    assert not carousel.auto_refresh.running
    carousel.set_visibility(True)

    assert carousel.auto_refresh.running
    assert carousel.auto_refresh._task is not refresh_task
    await carousel.stop()
