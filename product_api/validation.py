import math
from numbers import Real

from product_api.exceptions import ProductValidationError


def clean_name(name) -> str:
    """Return the name with surrounding whitespace stripped."""
    if not isinstance(name, str):
        raise ProductValidationError("name", "must be a string")
    stripped = name.strip()
    if not stripped:
        raise ProductValidationError("name", "must not be empty")
    return stripped


def clean_price(price) -> float:
    # bool is an int subclass but never a price
    if isinstance(price, bool) or not isinstance(price, Real):
        raise ProductValidationError("price", "must be a number")
    if not math.isfinite(price):
        raise ProductValidationError("price", "must be finite")
    if price < 0:
        raise ProductValidationError("price", "must not be negative")
    return float(price)
