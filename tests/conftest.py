import random
from datetime import datetime, timedelta, timezone

import pytest

from storefront.content_pool import ContentPool, PostDisplay, PromotionalPost, build_content_pool

NOW = datetime(2026, 3, 14, 12, 0, tzinfo=timezone.utc)


def make_post(post_id, category, priority, age_days, likes=100):
    return PromotionalPost(
        id=post_id,
        category=category,
        priority=priority,
        base_publish_time=NOW - timedelta(days=age_days),
        display=PostDisplay(
            author="tester",
            location="Palu",
            avatar="avatar.jpg",
            image=f"{post_id}.jpg",
            caption=f"caption {post_id}",
            tags="#test",
            like_baseline=likes,
        ),
    )


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def reference_pool():
    return build_content_pool(NOW)


@pytest.fixture
def make_pool():
    def _make(*rows):
        return ContentPool(make_post(*row) for row in rows)
    return _make
