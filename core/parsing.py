"""
Number and phone parsing shared by the form validators, the row mapper and
the derived-value calculators.

Amount rules:
  * None and blank strings parse to None.
  * int/float values pass through; NaN and infinities are rejected.
  * Strings lose currency symbols and whitespace (including NBSP).
  * When both '.' and ',' appear, the last one is the decimal separator and
    the other one groups thousands ("1.234,50" -> 1234.5, "1,234.50" -> 1234.5).
  * A separator that appears alone is a thousands separator when every group
    after it has exactly three digits ("300.000" -> 300000, "1,500" -> 1500),
    otherwise it is the decimal separator ("1,5" -> 1.5, "99.90" -> 99.9).
"""
import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional, Union

Number = Union[int, float]

_STRIP_CHARS = re.compile(r"[\s €$£]")
_AMOUNT_SHAPE = re.compile(r"^[+-]?[\d.,]+$")
_NON_DIGITS = re.compile(r"\D")

PHONE_PREFIX = "+351"
PHONE_DIGITS = 9


def _normalize_separators(text: str) -> str:
    if "." in text and "," in text:
        decimal_sep = "." if text.rfind(".") > text.rfind(",") else ","
        group_sep = "," if decimal_sep == "." else "."
        return text.replace(group_sep, "").replace(decimal_sep, ".")

    for sep in (".", ","):
        if sep in text:
            head, *groups = text.split(sep)
            sign_free_head = head.lstrip("+-")
            if (
                groups
                and all(len(g) == 3 for g in groups)
                and 1 <= len(sign_free_head) <= 3
            ):
                return text.replace(sep, "")
            if len(groups) > 1:
                raise ValueError(f"Ambiguous number: {text!r}")
            return text.replace(sep, ".")
    return text


def parse_amount(value: Any) -> Optional[float]:
    """Parse a price/area style amount, raising ValueError when malformed."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("Booleans are not amounts")
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
        if math.isnan(number) or math.isinf(number):
            raise ValueError(f"Not a finite number: {value!r}")
        return number
    if not isinstance(value, str):
        raise ValueError(f"Unsupported amount type: {type(value).__name__}")

    text = _STRIP_CHARS.sub("", value)
    if not text:
        return None
    if not _AMOUNT_SHAPE.match(text):
        raise ValueError(f"Not a number: {value!r}")

    number = float(_normalize_separators(text))
    if math.isnan(number) or math.isinf(number):
        raise ValueError(f"Not a finite number: {value!r}")
    return number


def coerce_amount(value: Any) -> Optional[float]:
    """Like parse_amount, but malformed input degrades to None."""
    try:
        return parse_amount(value)
    except ValueError:
        return None


def parse_count(value: Any) -> Optional[int]:
    """Parse a non-negative whole count (bedrooms, bathrooms, divisions)."""
    number = coerce_amount(value)
    if number is None or number < 0 or number != int(number):
        return None
    return int(number)


def parse_digits(value: Any, max_digits: int) -> Optional[int]:
    """Keep only digits, truncated to max_digits, as an integer.

    Mirrors the digit-only form inputs: "300 000 €" -> 300000.
    """
    if value is None:
        return None
    digits = _NON_DIGITS.sub("", str(value))[:max_digits]
    if not digits:
        return None
    return int(digits)


def round_half_up(value: Number, ndigits: int = 0) -> float:
    """Round halves away from zero instead of to the nearest even digit."""
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def phone_input_to_db(value: Optional[str]) -> Optional[str]:
    """Turn free-form input into the stored '+351 9xxxxxxxx' shape."""
    if not value:
        return None
    digits = _NON_DIGITS.sub("", value)[:PHONE_DIGITS]
    if not digits:
        return None
    return f"{PHONE_PREFIX} {digits}"


def phone_db_to_input(value: Optional[str]) -> str:
    """Strip the country prefix from a stored phone for editing."""
    if not value:
        return ""
    digits = _NON_DIGITS.sub("", value)
    if digits.startswith("351"):
        digits = digits[3:]
    return digits[:PHONE_DIGITS]


def is_valid_phone(value: Optional[str]) -> bool:
    return len(_NON_DIGITS.sub("", value or "")) == PHONE_DIGITS
