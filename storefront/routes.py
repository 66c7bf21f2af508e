from fastapi import APIRouter, FastAPI, Query

from .cart import CLEAR_PROMPT, DISPATCH_UNAVAILABLE_NOTICE, EMPTY_CART_NOTICE
from .catalog import categories, find_product, search_catalog
from .context import AppContext


def register_api_routes(app: FastAPI, ctx: AppContext) -> None:

    # ---------------------------------------------------
    # KATALOG + SEPET ROUTELARI
    # ---------------------------------------------------
    router = APIRouter(prefix="/api", tags=["storefront"])

    # 1) Ürün arama
    @router.get("/products")
    async def search_products_endpoint(
        query: str = Query("", description="Arama terimi"),
        category: str = Query("all", description="Kategori filtresi"),
    ):
        results = search_catalog(query, category)
        return {
            "products": results,
            "count": len(results),
            "categories": categories(),
        }

    # 2) Kategori filtresi
    @router.post("/products/filter")
    async def filter_products_endpoint(category: str = "all"):
        visible = ctx.catalog_filter.select(category)
        return {
            "activeFilter": ctx.catalog_filter.active_filter,
            "products": visible,
            "count": len(visible),
        }

    # 3) Sepete ekleme
    @router.post("/cart/add")
    async def add_to_cart_endpoint(productId: str):
        product = find_product(productId)
        if not product:
            return {"success": False, "message": "Produk tidak ditemukan"}

        item = ctx.cart.add_product(product)
        return {
            "success": True,
            "message": f"{item.name} ditambahkan ke keranjang",
            "cart": ctx.cart.summary(),
        }

    # 4) Adet değiştirme
    @router.post("/cart/adjust")
    async def adjust_quantity_endpoint(index: int, delta: int):
        changed = ctx.cart.adjust_quantity(index, delta)
        return {"success": changed, "cart": ctx.cart.summary()}

    # 5) Sepetten çıkarma
    @router.post("/cart/remove")
    async def remove_from_cart_endpoint(index: int):
        removed = ctx.cart.remove_item(index)
        return {"success": removed, "cart": ctx.cart.summary()}

    # 6) Sepeti temizleme (kullanıcı onayı istemciden gelir)
    @router.post("/cart/clear")
    async def clear_cart_endpoint(confirm: bool = False):
        cleared = ctx.cart.clear(lambda prompt: confirm)
        return {
            "success": cleared,
            "prompt": CLEAR_PROMPT,
            "cart": ctx.cart.summary(),
        }

    # 7) Sepeti görüntüleme
    @router.get("/cart")
    async def get_cart_endpoint():
        return ctx.cart.summary()

    @router.get("/cart/items/{index}")
    async def cart_item_details_endpoint(index: int):
        details = ctx.cart.item_details(index)
        if details is None:
            return {"success": False}
        return {"success": True, "details": details}

    # 8) Sipariş -> WhatsApp linki
    @router.post("/checkout")
    async def checkout_endpoint():
        url = ctx.cart.checkout()
        if url is None:
            notice = EMPTY_CART_NOTICE if ctx.cart.is_empty() else DISPATCH_UNAVAILABLE_NOTICE
            return {"success": False, "message": notice}

        return {
            "success": True,
            "url": url,
            "message": ctx.cart.generate_order_message(),
        }

    # ---------------------------------------------------
    # INSTAGRAM CAROUSEL ROUTELARI
    # ---------------------------------------------------
    @router.get("/feed")
    async def feed_endpoint():
        return ctx.carousel.presentation()

    @router.post("/feed/refresh")
    async def feed_refresh_endpoint():
        refreshed = await ctx.carousel.refresh()
        return {"refreshed": refreshed, **ctx.carousel.presentation()}

    @router.post("/feed/next")
    async def feed_next_endpoint():
        ctx.carousel.next_page()
        return ctx.carousel.presentation()

    @router.post("/feed/prev")
    async def feed_prev_endpoint():
        ctx.carousel.prev_page()
        return ctx.carousel.presentation()

    @router.post("/feed/goto")
    async def feed_goto_endpoint(page: int):
        ctx.carousel.go_to_page(page)
        return ctx.carousel.presentation()

    @router.post("/feed/resize")
    async def feed_resize_endpoint(width: int):
        ctx.carousel.resize(width)
        return ctx.carousel.presentation()

    @router.post("/feed/visibility")
    async def feed_visibility_endpoint(visible: bool):
        ctx.carousel.set_visibility(visible)
        return ctx.carousel.presentation()

    @router.post("/feed/hover")
    async def feed_hover_endpoint(inside: bool):
        ctx.carousel.set_hover(inside)
        return ctx.carousel.presentation()

    @router.post("/feed/swipe")
    async def feed_swipe_endpoint(startX: float, endX: float):
        ctx.carousel.touch_start(startX)
        ctx.carousel.touch_move(endX)
        direction = ctx.carousel.touch_end()
        return {"direction": direction, **ctx.carousel.presentation()}

    app.include_router(router)
