from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Iterator, Tuple

USERNAME = "meja_cafe.plw"
LOCATION = "Palu, Sulawesi Tengah"
AVATAR = "assets2/logo/logo.jpg"


@dataclass(frozen=True)
class PostDisplay:
    author: str
    location: str
    avatar: str
    image: str
    caption: str
    tags: str
    like_baseline: int


@dataclass(frozen=True)
class PromotionalPost:
    id: str
    category: str
    priority: int
    base_publish_time: datetime
    display: PostDisplay


class ContentPool:
    """Sabit, değişmez promosyon gönderisi havuzu."""

    def __init__(self, posts: Iterable[PromotionalPost]):
        posts = tuple(posts)
        seen = set()
        for post in posts:
            if post.id in seen:
                raise ValueError(f"duplicate post id in content pool: {post.id!r}")
            seen.add(post.id)
        self._posts: Tuple[PromotionalPost, ...] = posts

    @property
    def posts(self) -> Tuple[PromotionalPost, ...]:
        return self._posts

    def __iter__(self) -> Iterator[PromotionalPost]:
        return iter(self._posts)

    def __len__(self) -> int:
        return len(self._posts)


# (id, kategori, öncelik, gün cinsinden yaş, görsel, açıklama, etiketler, baz beğeni)
_REFERENCE_POSTS = [
    ("1", "meja", 1, 2, "assets2/meja/4 meja 1 kursi.jpeg",
     "✨ Set meja cafe minimalis dengan 4 kursi yang nyaman! Perfect untuk cafe kecil dengan nuansa cozy dan modern.",
     "#mejacafe #furnituredesign #coffeeshop #minimalist #interior", 143),
    ("2", "sofa", 2, 4, "assets2/sofa/Sofa Esty.jpeg",
     "🛋️ Sofa Esty series - kenyamanan premium untuk area lounge cafe Anda! Design elegant dengan material berkualitas.",
     "#sofacafe #premium #comfort #lounge #furniture", 89),
    ("3", "set", 1, 7, "assets2/set/Coffe table set.jpeg",
     "☕ Coffee table set dengan design industrial modern! Cocok untuk outdoor maupun indoor dengan style yang timeless.",
     "#coffeetable #industrial #outdoor #stylish #modern", 156),
    ("4", "meja", 3, 8, "assets2/meja/Meja komputer gaming.jpeg",
     "🎮 Meja gaming yang multifunctional! Bisa untuk workspace cafe dengan storage yang praktis dan cable management rapi.",
     "#mejagaming #workspace #multifunctional #modern #storage", 201),
    # 14 günden 3 güne çekildi: en yeni üç öncelik-1 gönderisi üç farklı kategoriyi kapsasın
    ("5", "sofa", 1, 3, "assets2/sofa/Sofa gucchi 2 seater.jpeg",
     "💎 Sofa Gucci 2 seater - luxury meets comfort! Design eksklusif untuk area VIP cafe dengan material premium.",
     "#sofagucci #luxury #vip #exclusive #premium #comfort", 342),
    ("6", "set", 2, 15, "assets2/set/Set couple ropan busa.jpeg",
     "💕 Set couple dengan ropan busa super empuk! Perfect untuk date corner di cafe dengan nuansa romantic.",
     "#setcouple #romantic #datespot #comfort #soft #cafe", 97),
    ("7", "meja", 2, 10, "assets2/meja/Meja taman.jpeg",
     "🌿 Meja taman outdoor dengan design weather-resistant! Perfect untuk area outdoor cafe dengan nuansa natural.",
     "#mejataman #outdoor #weatherproof #natural #garden", 178),
    ("8", "set", 1, 5, "assets2/set/set elinda.jpeg",
     "✨ Set Elinda dengan design contemporary elegant! Kombinasi sofa dan meja yang sempurna untuk area VIP.",
     "#setelinda #contemporary #elegant #vip #exclusive", 234),
    ("9", "meja", 3, 12, "assets2/meja/Meja konsol.jpeg",
     "📺 Meja konsol multifungsi dengan storage yang maksimal! Cocok untuk display produk atau area kasir cafe.",
     "#mejakonsol #storage #display #kasir #multifungsi", 126),
]


def build_content_pool(now: datetime) -> ContentPool:
    """Referans havuz; yayın zamanları ``now``'dan geriye sabit gün farklarıdır."""
    return ContentPool(
        PromotionalPost(
            id=post_id,
            category=category,
            priority=priority,
            base_publish_time=now - timedelta(days=age_days),
            display=PostDisplay(
                author=USERNAME,
                location=LOCATION,
                avatar=AVATAR,
                image=image,
                caption=caption,
                tags=tags,
                like_baseline=likes,
            ),
        )
        for post_id, category, priority, age_days, image, caption, tags, likes in _REFERENCE_POSTS
    )
