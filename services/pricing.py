"""
Derived price values shown on offer and property cards.
"""
from typing import Optional

from core.parsing import round_half_up


def _discount_inputs(original: Optional[float], discounted: Optional[float]) -> bool:
    return original is not None and discounted is not None and original > 0


def discount_percent(original: Optional[float], discounted: Optional[float]) -> Optional[int]:
    """Whole-number percentage saved, rounded half up; None without both prices."""
    if not _discount_inputs(original, discounted):
        return None
    return int(round_half_up((original - discounted) / original * 100))


def discount_amount(original: Optional[float], discounted: Optional[float]) -> Optional[float]:
    if not _discount_inputs(original, discounted):
        return None
    return round_half_up(original - discounted, 2)


def discount_badge(original: Optional[float], discounted: Optional[float]) -> Optional[str]:
    percent = discount_percent(original, discounted)
    if percent is None or percent <= 0:
        return None
    return f"-{percent}%"


def price_per_area(price: Optional[float], area: Optional[float]) -> Optional[float]:
    """Price per square metre to two decimals, or None when undefined."""
    if price is None or area is None or price <= 0 or area <= 0:
        return None
    return round_half_up(price / area, 2)
