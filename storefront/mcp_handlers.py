from mcp.server.fastmcp import FastMCP

from .cart import DISPATCH_UNAVAILABLE_NOTICE, EMPTY_CART_NOTICE
from .catalog import find_product, search_catalog
from .context import AppContext


def register_mcp(mcp: FastMCP, ctx: AppContext):
    """MCP tool registration"""

    @mcp.tool()
    async def search_products(query: str = "", category: str = "all") -> dict:
        """Cari produk di katalog"""
        results = search_catalog(query, category)
        return {"products": results, "count": len(results)}

    @mcp.tool()
    async def add_to_cart(productId: str) -> dict:
        """Tambahkan produk ke keranjang"""
        product = find_product(productId)
        if not product:
            return {"success": False, "message": "Produk tidak ditemukan"}

        item = ctx.cart.add_product(product)
        return {
            "success": True,
            "message": f"{item.name} ditambahkan ke keranjang",
            "cart": ctx.cart.summary(),
        }

    @mcp.tool()
    async def adjust_quantity(index: int, delta: int) -> dict:
        """Ubah jumlah item di keranjang (<= 0 menghapus item)"""
        changed = ctx.cart.adjust_quantity(index, delta)
        return {"success": changed, "cart": ctx.cart.summary()}

    @mcp.tool()
    async def remove_from_cart(index: int) -> dict:
        """Hapus item dari keranjang"""
        removed = ctx.cart.remove_item(index)
        return {"success": removed, "cart": ctx.cart.summary()}

    @mcp.tool()
    async def clear_cart(confirm: bool = False) -> dict:
        """Kosongkan keranjang (butuh konfirmasi)"""
        cleared = ctx.cart.clear(lambda prompt: confirm)
        return {"success": cleared, "cart": ctx.cart.summary()}

    @mcp.tool()
    async def get_cart() -> dict:
        """Tampilkan keranjang"""
        return ctx.cart.summary()

    @mcp.tool()
    async def checkout() -> dict:
        """Kirim pesanan lewat WhatsApp"""
        url = ctx.cart.checkout()
        if url is None:
            notice = EMPTY_CART_NOTICE if ctx.cart.is_empty() else DISPATCH_UNAVAILABLE_NOTICE
            return {"success": False, "message": notice}
        return {"success": True, "url": url}

    @mcp.tool()
    async def get_feed() -> dict:
        """Halaman carousel Instagram saat ini"""
        return ctx.carousel.presentation()

    @mcp.tool()
    async def feed_next() -> dict:
        """Geser carousel ke halaman berikutnya"""
        ctx.carousel.next_page()
        return ctx.carousel.presentation()

    @mcp.tool()
    async def feed_prev() -> dict:
        """Geser carousel ke halaman sebelumnya"""
        ctx.carousel.prev_page()
        return ctx.carousel.presentation()
