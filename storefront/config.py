# storefront/config.py
import os


def _get_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Dışarıdan erişilen servis adresi (debug / info endpoint'leri için)
BASE_URL = os.getenv("BASE_URL", "http://localhost:8000")

# Sipariş mesajının gönderildiği WhatsApp hattı
WHATSAPP_BASE_URL = os.getenv("WHATSAPP_BASE_URL", "https://wa.me")
WHATSAPP_NUMBER = os.getenv("WHATSAPP_NUMBER", "6285220888840")

INSTAGRAM_PROFILE_URL = os.getenv(
    "INSTAGRAM_PROFILE_URL", "https://www.instagram.com/meja_cafe.plw"
)

CURRENCY_SYMBOL = "Rp"

# Carousel zamanlayıcıları (saniye)
AUTOPLAY_DELAY = _get_float("AUTOPLAY_DELAY", 5.0)
REFRESH_DELAY = _get_float("REFRESH_DELAY", 30.0)
INITIAL_LOAD_DELAY = _get_float("INITIAL_LOAD_DELAY", 1.5)
REFRESH_LOAD_DELAY = _get_float("REFRESH_LOAD_DELAY", 1.2)

MAX_DISPLAY_POSTS = _get_int("MAX_DISPLAY_POSTS", 6)

# Yatay kaydırma eşiği (piksel)
SWIPE_THRESHOLD = 50
