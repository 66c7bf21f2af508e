import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .config import CURRENCY_SYMBOL

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# float'ın en büyük değeri ~1.8e308; tam sayı kısmı için yeterli hassasiyet
_FORMAT_PRECISION = 400


def coerce_amount(value) -> float:
    """Sonlu bir sayı döner; geri kalan her şey 0 olur."""
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def coerce_int(value) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return int(coerce_amount(value))


def coerce_price(value) -> int:
    """Katalogdaki fiyat alanını data-price gibi okur.

    Sadece baştaki tam sayı geçerlidir ("2500000", "1500 rb" -> 1500);
    eksik, okunamayan veya negatif fiyat 0'dır.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(0, value)
    if isinstance(value, float):
        return max(0, int(coerce_amount(value)))
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    try:
        return max(0, int(match.group(1)))
    except ValueError:
        # int_max_str_digits sınırını aşan rakam dizisi
        return 0


def format_number(amount) -> str:
    if isinstance(amount, int) and not isinstance(amount, bool):
        rounded = amount
    else:
        with localcontext() as ctx:
            ctx.prec = _FORMAT_PRECISION
            rounded = int(Decimal(coerce_amount(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    try:
        return f"{rounded:,}".replace(",", ".")
    except ValueError:
        return "0"


def format_currency(amount) -> str:
    return f"{CURRENCY_SYMBOL} {format_number(amount)}"
