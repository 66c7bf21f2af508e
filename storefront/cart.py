from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from .catalog import extract_product
from .checkout import OrderDispatcher
from .components import Component
from .logging_config import get_logger
from .money import coerce_int, coerce_price, format_currency

logger = get_logger("ShoppingCart")

CLEAR_PROMPT = "Hapus semua item dari keranjang?"
EMPTY_CART_NOTICE = "Keranjang masih kosong!"
DISPATCH_UNAVAILABLE_NOTICE = "Pesanan tidak dapat dikirim saat ini"

ORDER_HEADER = "*PESANAN FURNITURE CAFE*"
ORDER_CLOSING = "Mohon konfirmasi ketersediaan dan proses pemesanan. Terima kasih!"


@dataclass
class CartItem:
    name: str
    unit_price: int
    quantity: int = 1
    image: str = ""

    @property
    def subtotal(self) -> int:
        return self.unit_price * self.quantity


@dataclass
class CartView:
    """
    Sepetin render hedefleri. Her biri opsiyonel; olmayan hedef sessizce atlanır.

    list        -> summary()["items"] listesi
    badge       -> toplam adet
    total       -> formatlanmış toplam tutar
    empty_state -> sepet boş mu
    """
    list: Optional[Callable[[List[Dict[str, Any]]], Any]] = None
    badge: Optional[Callable[[int], Any]] = None
    total: Optional[Callable[[str], Any]] = None
    empty_state: Optional[Callable[[bool], Any]] = None


class ShoppingCart(Component):
    def __init__(self, view: Optional[CartView] = None,
                 dispatcher: Optional[OrderDispatcher] = None,
                 notify: Optional[Callable[[str], Any]] = None):
        super().__init__("ShoppingCart")
        self.items: List[CartItem] = []
        self.view = view
        self.dispatcher = dispatcher
        self.notify = notify

    async def start(self) -> None:
        self.render()

    # ---------------------------------------------------
    # Mutations
    # ---------------------------------------------------
    def add_item(self, name: str, unit_price: Any = 0, image: str = "") -> CartItem:
        existing = self.find_item(name)
        if existing:
            existing.quantity += 1
            item = existing
        else:
            item = CartItem(name=name, unit_price=coerce_price(unit_price), image=image or "")
            self.items.append(item)

        logger.info("item_added", name=name, quantity=item.quantity)
        self.render()
        return item

    def add_product(self, entry: Mapping[str, Any]) -> CartItem:
        product = extract_product(entry)
        return self.add_item(product["name"], product["price"], product["image"])

    def find_item(self, name: str) -> Optional[CartItem]:
        return next((item for item in self.items if item.name == name), None)

    def adjust_quantity(self, index: int, delta: int) -> bool:
        if not self._in_bounds(index):
            return False

        item = self.items[index]
        item.quantity += coerce_int(delta)

        if item.quantity <= 0:
            return self.remove_item(index)

        self.render()
        return True

    def remove_item(self, index: int) -> bool:
        if not self._in_bounds(index):
            return False

        removed = self.items.pop(index)
        logger.info("item_removed", name=removed.name)
        self.render()
        return True

    def clear(self, confirm: Callable[[str], bool]) -> bool:
        try:
            confirmed = bool(confirm(CLEAR_PROMPT))
        except Exception:
            logger.exception("clear_confirmation_failed")
            return False

        if not confirmed:
            return False

        self.items = []
        logger.info("cart_cleared")
        self.render()
        return True

    # ---------------------------------------------------
    # Queries
    # ---------------------------------------------------
    def is_empty(self) -> bool:
        return len(self.items) == 0

    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    def total_amount(self) -> int:
        return sum(item.subtotal for item in self.items)

    def item_details(self, index: int) -> Optional[str]:
        if not self._in_bounds(index):
            return None
        item = self.items[index]
        return f"Detail Produk:\n\n{item.name}\nJumlah: {item.quantity} unit\n\nHubungi kami untuk info harga!"

    def summary(self) -> Dict[str, Any]:
        items = []
        for index, item in enumerate(self.items):
            items.append({
                "index": index,
                "name": item.name,
                "image": item.image,
                "quantity": item.quantity,
                "unitPrice": item.unit_price,
                "unitPriceFormatted": format_currency(item.unit_price),
                "subtotal": item.subtotal,
                "subtotalFormatted": format_currency(item.subtotal),
            })

        total_amount = self.total_amount()
        return {
            "items": items,
            "isEmpty": self.is_empty(),
            "totalAmount": total_amount,
            "totalAmountFormatted": format_currency(total_amount),
            "totalQuantity": self.total_quantity(),
        }

    # ---------------------------------------------------
    # Order handoff
    # ---------------------------------------------------
    def generate_order_message(self) -> str:
        message = f"{ORDER_HEADER}\n\n"
        total_amount = 0

        for index, item in enumerate(self.items, start=1):
            item_total = item.subtotal
            total_amount += item_total

            message += f"{index}. {item.name}\n"
            message += f"   Jumlah: {item.quantity} unit\n"
            message += f"   Harga: {format_currency(item.unit_price)}\n"
            message += f"   Subtotal: {format_currency(item_total)}\n\n"

        message += f"*TOTAL: {format_currency(total_amount)}*\n\n"
        message += ORDER_CLOSING
        return message

    def checkout(self) -> Optional[str]:
        if self.is_empty():
            self._notify(EMPTY_CART_NOTICE)
            return None

        message = self.generate_order_message()
        if self.dispatcher is None:
            logger.warning("checkout_without_dispatcher")
            return None
        return self.dispatcher.dispatch(message)

    # ---------------------------------------------------
    # Rendering
    # ---------------------------------------------------
    def render(self) -> None:
        if self.view is None:
            return

        summary = self.summary()
        self._push("list", summary["items"])
        self._push("badge", summary["totalQuantity"])
        self._push("total", summary["totalAmountFormatted"])
        self._push("empty_state", summary["isEmpty"])

    def _push(self, target_name: str, value: Any) -> None:
        target = getattr(self.view, target_name, None)
        if target is None:
            return
        try:
            target(value)
        except Exception:
            logger.exception("render_target_failed", target=target_name)

    def _notify(self, message: str) -> None:
        if self.notify is None:
            logger.info("notice", message=message)
            return
        try:
            self.notify(message)
        except Exception:
            logger.exception("notify_failed", message=message)

    def _in_bounds(self, index: int) -> bool:
        return isinstance(index, int) and 0 <= index < len(self.items)