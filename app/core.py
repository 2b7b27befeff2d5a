import math
from typing import Any

from .errors import ValidationFailed
from .models import Product, ProductIn


def is_number(value: Any) -> bool:
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # ints of any size are finite; only floats can be nan/inf
    return isinstance(value, int) or math.isfinite(value)


def truthy(value: Any) -> bool:
    """JavaScript-style truthiness, used to coerce ``inStock``."""
    if value is None or value is False:
        return False
    if isinstance(value, int):
        return value != 0
    if isinstance(value, float):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def validate_product(payload: ProductIn) -> None:
    name_ok = isinstance(payload.name, str) and payload.name != ""
    if not name_ok or not is_number(payload.price):
        raise ValidationFailed()


def _make_product(product_id: str, p: ProductIn) -> Product:
    return Product(
        id=product_id,
        name=p.name,
        description=p.description,
        price=p.price,
        category=p.category,
        in_stock=truthy(p.in_stock),
    )


def to_product_in(body: Any) -> ProductIn:
    """Turn a decoded request body into a payload; no body counts as ``{}``."""
    if body is None:
        return ProductIn()
    if isinstance(body, ProductIn):
        return body
    if not isinstance(body, dict):
        raise ValidationFailed()
    return ProductIn.model_validate(body)
