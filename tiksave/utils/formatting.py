from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

ONE_DECIMAL = Decimal("0.1")


def _compact(num: int, divisor: int, suffix: str) -> str:
    # Ties round up (1250 -> 1.3K), like the browser's toFixed(1)
    value = (Decimal(num) / divisor).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
    text = str(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text + suffix


def format_count(num: Optional[int]) -> str:
    """1500000 -> '1.5M', 1500 -> '1.5K', 500 -> '500'"""
    if not num:
        return "0"
    if num >= 1_000_000:
        return _compact(num, 1_000_000, "M")
    if num >= 1_000:
        return _compact(num, 1_000, "K")
    return str(num)


def format_duration(seconds: Optional[int]) -> str:
    """Seconds as m:ss"""
    if not seconds:
        return "0:00"
    mins, secs = divmod(int(seconds), 60)
    return f"{mins}:{secs:02d}"
