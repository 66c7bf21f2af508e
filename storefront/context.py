import random
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from . import config
from .carousel import ContentCarousel
from .cart import CartView, ShoppingCart
from .catalog import ProductFilter
from .checkout import OrderDispatcher
from .components import ComponentRegistry
from .content_pool import build_content_pool
from .selection import utc_now


@dataclass
class AppContext:
    """Başlangıçta bir kez kurulur, ihtiyaç duyan her yere parametre olarak geçer."""
    catalog_filter: ProductFilter
    cart: ShoppingCart
    dispatcher: OrderDispatcher
    carousel: ContentCarousel
    registry: ComponentRegistry


def build_context(*, rng: Optional[random.Random] = None,
                  clock: Callable[[], datetime] = utc_now,
                  cart_view: Optional[CartView] = None,
                  notify: Optional[Callable[[str], Any]] = None,
                  opener: Optional[Callable[[str], Any]] = None,
                  initial_load_delay: float = config.INITIAL_LOAD_DELAY,
                  refresh_load_delay: float = config.REFRESH_LOAD_DELAY,
                  autoplay_delay: float = config.AUTOPLAY_DELAY,
                  refresh_delay: float = config.REFRESH_DELAY) -> AppContext:
    dispatcher = OrderDispatcher(opener=opener)
    catalog_filter = ProductFilter()
    cart = ShoppingCart(view=cart_view, dispatcher=dispatcher, notify=notify)
    carousel = ContentCarousel(
        build_content_pool(clock()),
        rng=rng,
        clock=clock,
        max_display_posts=config.MAX_DISPLAY_POSTS,
        autoplay_delay=autoplay_delay,
        refresh_delay=refresh_delay,
        initial_load_delay=initial_load_delay,
        refresh_load_delay=refresh_load_delay,
    )

    registry = ComponentRegistry()
    registry.register(catalog_filter)
    registry.register(cart)
    registry.register(carousel)

    return AppContext(
        catalog_filter=catalog_filter,
        cart=cart,
        dispatcher=dispatcher,
        carousel=carousel,
        registry=registry,
    )
