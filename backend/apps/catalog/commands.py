import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .exceptions import CatalogValidationError

CATEGORY_NAME_MIN_LENGTH = 5
CATEGORY_NAME_MAX_LENGTH = 100
PRODUCT_NAME_MIN_LENGTH = 3
PRODUCT_NAME_MAX_LENGTH = 255
PRODUCT_DESCRIPTION_MIN_LENGTH = 5


def _first(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    # Accept both wire (camelCase) and python (snake_case) keys.
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _as_float(value: Any, field: str, errors: Dict[str, str]) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        errors[field] = f"{field} must be a number"
        return 0.0
    if not math.isfinite(number):
        errors[field] = f"{field} must be a finite number"
        return 0.0
    return number


def _as_int(value: Any, field: str, errors: Dict[str, str]) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        errors[field] = f"{field} must be an integer"
        return 0


def compute_special_price(price: float, discount: float) -> float:
    return price - (discount / 100) * price


# Category Commands
@dataclass
class CategoryCommand:
    name: str

    @staticmethod
    def from_raw(payload: Dict[str, Any]) -> "CategoryCommand":
        data = dict(payload or {})
        # ignore id if present
        data.pop("id", None)
        data.pop("categoryId", None)
        cmd = CategoryCommand(
            name=str(_first(data, "categoryName", "category_name", "name", default="")).strip()
        )
        cmd.validate()
        return cmd

    def validate(self) -> None:
        if not self.name:
            raise CatalogValidationError({"categoryName": "Category name must not be blank"})
        if len(self.name) < CATEGORY_NAME_MIN_LENGTH:
            raise CatalogValidationError(
                {
                    "categoryName": "Category name must be at least "
                    f"{CATEGORY_NAME_MIN_LENGTH} characters long"
                }
            )
        if len(self.name) > CATEGORY_NAME_MAX_LENGTH:
            raise CatalogValidationError(
                {
                    "categoryName": "Category name must be at most "
                    f"{CATEGORY_NAME_MAX_LENGTH} characters long"
                }
            )


# Product Commands
@dataclass
class ProductCommand:
    """Writable product fields. ``special_price``, ``image`` and ``category`` are never taken from input."""

    name: str
    description: str
    quantity: int
    price: float
    discount: float

    @property
    def special_price(self) -> float:
        return compute_special_price(self.price, self.discount)

    @staticmethod
    def from_raw(payload: Dict[str, Any]) -> "ProductCommand":
        data = dict(payload or {})
        errors: Dict[str, str] = {}
        cmd = ProductCommand(
            name=str(_first(data, "productName", "product_name", "name", default="")).strip(),
            description=str(
                _first(data, "productDescription", "product_description", "description", default="")
            ).strip(),
            quantity=_as_int(_first(data, "quantity", default=0), "quantity", errors),
            price=_as_float(_first(data, "price", default=0), "price", errors),
            discount=_as_float(_first(data, "discount", default=0), "discount", errors),
        )
        cmd.validate(errors)
        return cmd

    def validate(self, errors: Optional[Dict[str, str]] = None) -> None:
        errors = dict(errors or {})
        if not self.name:
            errors["productName"] = "Product name must not be blank"
        elif len(self.name) < PRODUCT_NAME_MIN_LENGTH:
            errors["productName"] = (
                f"Product name must be at least {PRODUCT_NAME_MIN_LENGTH} characters long"
            )
        elif len(self.name) > PRODUCT_NAME_MAX_LENGTH:
            errors["productName"] = (
                f"Product name must be at most {PRODUCT_NAME_MAX_LENGTH} characters long"
            )
        if self.description and len(self.description) < PRODUCT_DESCRIPTION_MIN_LENGTH:
            errors["productDescription"] = (
                "Product description must be at least "
                f"{PRODUCT_DESCRIPTION_MIN_LENGTH} characters long"
            )
        if "quantity" not in errors and self.quantity < 0:
            errors["quantity"] = "quantity must not be negative"
        if "price" not in errors and self.price < 0:
            errors["price"] = "price must not be negative"
        if errors:
            raise CatalogValidationError(errors)

    def as_fields(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "quantity": self.quantity,
            "price": self.price,
            "discount": self.discount,
            "special_price": self.special_price,
        }
