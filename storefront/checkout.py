from typing import Any, Callable, Optional
from urllib.parse import quote

from .config import WHATSAPP_BASE_URL, WHATSAPP_NUMBER
from .logging_config import get_logger

logger = get_logger("OrderDispatcher")

# encodeURIComponent ile aynı: A-Z a-z 0-9 - _ . ! ~ * ' ( ) dokunulmaz
_UNRESERVED = "-_.!~*'()"


def build_whatsapp_url(message: str, number: str = WHATSAPP_NUMBER,
                       base_url: str = WHATSAPP_BASE_URL) -> str:
    encoded = quote(message, safe=_UNRESERVED, encoding="utf-8")
    return f"{base_url.rstrip('/')}/{number}?text={encoded}"


class OrderDispatcher:
    """
    Sipariş mesajını WhatsApp linkine çevirir ve host ortamına açtırır.

    opener verilmemişse link sadece last_url'de tutulur; HTTP istemcisi
    dönen linki kendisi yeni sekmede açar.
    """

    def __init__(self, opener: Optional[Callable[[str], Any]] = None,
                 number: str = WHATSAPP_NUMBER, base_url: str = WHATSAPP_BASE_URL):
        self.opener = opener
        self.number = number
        self.base_url = base_url
        self.last_url: Optional[str] = None

    def dispatch(self, message: str) -> str:
        url = build_whatsapp_url(message, self.number, self.base_url)
        self.last_url = url
        if self.opener is not None:
            try:
                self.opener(url)
            except Exception:
                logger.exception("open_link_failed", url=url)
        logger.info("order_dispatched", length=len(message))
        return url
