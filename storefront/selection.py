"""Promosyon carousel'ı için taze gönderi seçimi.

Her seçim döngüsü havuzdaki her gönderinin o tura özel bir görünümünü
üretir (gürültülü beğeni sayısı, kaydırılmış zaman damgası, göreli yaş
etiketi), bunları önce önceliğe sonra yeniliğe göre sıralar ve ilk
slotlarda kategori çeşitliliğini gözeten sınırlı bir alt küme seçer.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, List, Optional

from .content_pool import PromotionalPost
from .logging_config import get_logger

logger = get_logger("Selection")

LIKES_NOISE = 10
TIMESTAMP_JITTER_MS = 2 * 60 * 60 * 1000
DIVERSITY_SLOTS = 3

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


@dataclass(frozen=True)
class SelectedPost:
    post: PromotionalPost
    likes: int
    timestamp: datetime
    age_label: str

    @property
    def id(self) -> str:
        return self.post.id

    @property
    def category(self) -> str:
        return self.post.category

    @property
    def priority(self) -> int:
        return self.post.priority


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def relative_age_label(timestamp: datetime, now: datetime) -> str:
    elapsed = (now - timestamp).total_seconds()
    days = int(elapsed // _DAY)
    hours = int(elapsed // _HOUR)
    minutes = int(elapsed // _MINUTE)

    if days > 0:
        if days == 1:
            return "1 DAY AGO"
        if days < 7:
            return f"{days} DAYS AGO"
        if days < 14:
            return "1 WEEK AGO"
        return f"{days // 7} WEEKS AGO"
    if hours > 0:
        return f"{hours}H AGO"
    return f"{max(1, minutes)}M AGO"


def derive_selected_post(post: PromotionalPost, rng: random.Random, now: datetime) -> SelectedPost:
    likes = max(1, post.display.like_baseline + rng.randint(-LIKES_NOISE, LIKES_NOISE))
    timestamp = post.base_publish_time + timedelta(milliseconds=rng.randint(0, TIMESTAMP_JITTER_MS))
    return SelectedPost(
        post=post,
        likes=likes,
        timestamp=timestamp,
        age_label=relative_age_label(timestamp, now),
    )


def select_fresh_set(pool: Iterable[PromotionalPost], max_count: int,
                     rng: Optional[random.Random] = None,
                     clock: Optional[Callable[[], datetime]] = None) -> List[SelectedPost]:
    rng = rng or random.Random()
    now = (clock or utc_now)()

    derived = [derive_selected_post(post, rng, now) for post in pool]
    # sorted() stabil; aynı öncelikte en yeni önce
    ranked = sorted(derived, key=lambda p: (p.priority, -p.timestamp.timestamp()))

    if max_count <= 0:
        return []

    selected: List[SelectedPost] = []
    categories = set()

    for post in ranked:
        if len(selected) >= max_count:
            break
        if post.category not in categories or len(selected) < DIVERSITY_SLOTS:
            selected.append(post)
            categories.add(post.category)

    chosen_ids = {p.id for p in selected}
    for post in ranked:
        if len(selected) >= max_count:
            break
        if post.id not in chosen_ids:
            selected.append(post)
            chosen_ids.add(post.id)

    logger.info(
        "fresh_posts_generated",
        count=len(selected[:max_count]),
        categories=sorted(categories),
    )
    return selected[:max_count]
