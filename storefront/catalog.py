from typing import Any, Dict, List, Mapping, Optional

from .components import Component
from .logging_config import get_logger
from .money import coerce_price

logger = get_logger("ProductFilter")

ALL_CATEGORIES = "all"

CATALOG = [
    {"id": "sofa-esty", "name": "Sofa Esty", "price": 2500000, "image": "assets2/sofa/Sofa Esty.jpeg",
     "category": "sofa", "description": "Sofa lounge dengan material premium"},
    {"id": "sofa-gucci", "name": "Sofa Gucci 2 Seater", "price": 4750000, "image": "assets2/sofa/Sofa gucchi 2 seater.jpeg",
     "category": "sofa", "description": "Sofa 2 seater untuk area VIP"},
    {"id": "meja-4-kursi", "name": "Meja 4 Kursi", "price": 3200000, "image": "assets2/meja/4 meja 1 kursi.jpeg",
     "category": "meja", "description": "Set meja cafe minimalis dengan 4 kursi"},
    {"id": "meja-gaming", "name": "Meja Komputer Gaming", "price": 1850000, "image": "assets2/meja/Meja komputer gaming.jpeg",
     "category": "meja", "description": "Meja gaming multifungsi dengan storage"},
    {"id": "meja-taman", "name": "Meja Taman", "price": 1400000, "image": "assets2/meja/Meja taman.jpeg",
     "category": "meja", "description": "Meja outdoor tahan cuaca"},
    {"id": "meja-konsol", "name": "Meja Konsol", "price": None, "image": "assets2/meja/Meja konsol.jpeg",
     "category": "meja", "description": "Meja konsol untuk display atau kasir"},
    {"id": "set-coffee-table", "name": "Coffee Table Set", "price": 2900000, "image": "assets2/set/Coffe table set.jpeg",
     "category": "set", "description": "Coffee table set industrial modern"},
    {"id": "set-couple", "name": "Set Couple Ropan Busa", "price": 2100000, "image": "assets2/set/Set couple ropan busa.jpeg",
     "category": "set", "description": "Set couple dengan ropan busa empuk"},
    {"id": "set-elinda", "name": "Set Elinda", "price": None, "image": "assets2/set/set elinda.jpeg",
     "category": "set", "description": "Kombinasi sofa dan meja contemporary"},
]


def find_product(product_id: str) -> Optional[Dict[str, Any]]:
    return next((p for p in CATALOG if p["id"] == product_id), None)


def search_catalog(query: str | None, category: str | None = None):
    results = CATALOG
    if category and category != ALL_CATEGORIES:
        results = [p for p in results if p["category"] == category]
    if not query:
        return list(results)
    q = query.lower()
    return [p for p in results if q in p["name"].lower() or q in p["description"].lower()]


def categories() -> List[str]:
    return list(dict.fromkeys(p["category"] for p in CATALOG))


def extract_product(entry: Mapping[str, Any]) -> Dict[str, Any]:
    """Katalog kaydından sepete ekleme alanlarını okur."""
    name = str(entry.get("name") or "").strip()
    return {
        "name": name or "Unknown",
        "price": coerce_price(entry.get("price")),
        "image": entry.get("image") or "",
    }


class ProductFilter(Component):
    """Katalog üzerinde kategori filtresi (``"all"`` hepsini gösterir)."""

    def __init__(self, catalog: Optional[List[Dict[str, Any]]] = None):
        super().__init__("ProductFilter")
        self.catalog = CATALOG if catalog is None else catalog
        self.active_filter = ALL_CATEGORIES

    async def start(self) -> None:
        self.active_filter = ALL_CATEGORIES

    def select(self, category: str | None) -> List[Dict[str, Any]]:
        self.active_filter = (category or "").strip() or ALL_CATEGORIES
        logger.info("filter_selected", active_filter=self.active_filter)
        return self.visible_products()

    def should_display(self, category: str) -> bool:
        return self.active_filter == ALL_CATEGORIES or category == self.active_filter

    def visible_products(self) -> List[Dict[str, Any]]:
        return [p for p in self.catalog if self.should_display(p["category"])]
